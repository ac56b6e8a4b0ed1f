"""delete-rest：依 keepfile 篩選相機檔案。"""

__version__ = "0.1.0"
