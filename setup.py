from setuptools import find_packages, setup

setup(
    name="delete-rest",
    version="0.1.0",
    description="依 keepfile 複製、搬移或刪除相機檔案的命令列工具",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["PyYAML>=6.0"],
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["delete-rest=delete_rest.main:main"]},
)
