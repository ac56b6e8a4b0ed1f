"""工具模組。"""
