"""Setup script for create-gaarf-wf."""

from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    """Version of the distribution, kept in one place."""
    for line in (Path(__file__).parent / "gaarf_wf" / "__init__.py").read_text(encoding="utf-8").splitlines():
        if line.strip().startswith('__version__ = "'):
            return line.split('"')[1]
    return "0.0.0"


setup(
    name="create-gaarf-wf",
    version=read_version(),
    description="Interactive generator for Gaarf Workflow (Google Ads API Report Fetcher Workflow)",
    packages=find_packages(include=["gaarf_wf", "gaarf_wf.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "rich>=13.0",
        "pyyaml>=6.0",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "create-gaarf-wf=gaarf_wf.__main__:main",
        ],
    },
)
