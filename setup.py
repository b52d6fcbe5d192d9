"""Setup configuration for roomguard."""

from setuptools import setup, find_packages

setup(
    name="roomguard",
    version="0.0.1",
    description="Typed settings and registry for room-moderation protections",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "PyYAML>=6.0",
        "prompt_toolkit>=3.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
