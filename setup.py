from setuptools import setup, find_packages

setup(
    name="LivePoints",
    version="0.1.0",
    author="Lukas Penner",
    description="Live panel of the most recent N points with a thread-safe point buffer",
    packages=find_packages(include=["LivePoints", "LivePoints.*"]),
    install_requires=[
        # Pin 1.24.4 for Python < 3.12
        "numpy==1.24.4; python_version<'3.12'",
        # Allow newer NumPy for Python >= 3.12
        "numpy>=1.26.0; python_version>='3.12'",
        "pyqtgraph>=0.13.3",
        "PyQt5>=5.15.10",
        "PyQt5-sip>=12.15.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "livepoints=LivePoints.app:main",
        ],
    },
    python_requires=">=3.8",
)
