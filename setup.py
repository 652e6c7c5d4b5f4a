from setuptools import setup, find_namespace_packages

setup(
    name="hangar",
    version="0.1.0",
    description="Aircraft fleet registry: flat-file storage, validation and analytics",
    package_dir={"": "backend"},
    packages=find_namespace_packages(where="backend", include=["hangar*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.95",
        "uvicorn>=0.22",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "httpx>=0.23",  # fastapi.testclient
        ],
        "lint": [
            "black>=23.0",
            "flake8>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hangar-console=hangar.console:main",
            "hangar-api=hangar.main:run",
        ],
    },
)
