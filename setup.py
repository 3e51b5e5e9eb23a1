from setuptools import setup, find_namespace_packages

setup(
    name="bookshelf",
    version="0.1.0",
    packages=find_namespace_packages(include=['bookshelf*', 'api*', 'cli*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "requests",
        "pydantic>=2",
        "fastapi",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "bookshelf=cli.main:main",
        ],
    },
)
