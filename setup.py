"""Setup configuration for Route Sheet Viewer package."""

from setuptools import setup, find_packages

setup(
    name="route-sheet-viewer",
    version="1.0.0",
    description="Filterable origin/destination table over a Google Sheet",
    author="Alex",
    author_email="",
    packages=find_packages(include=["config", "config.*", "src", "src.*", "app", "app.*", "scripts"]),
    python_requires=">=3.11",
    install_requires=[
        "pandas>=2.1.0",
        "streamlit>=1.46.0",
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "tenacity>=8.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "route-check-sheet=scripts.check_sheet:main",
        ],
    },
)
