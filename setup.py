from setuptools import setup, find_packages

setup(
    name="color-hunt",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "opencv-python>=4.8.0",
        "numpy>=1.21.0",
        "scikit-learn>=1.2.0",
        "tqdm>=4.64.0",
    ],
    extras_require={
        "speech": ["pyttsx3>=2.90"],
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "color-hunt=color_hunt.live:main",
            "color-hunt-evaluate=color_hunt.evaluate:main",
        ],
    },
    python_requires=">=3.8",
    author="Color Hunt Team",
    description="Find-the-color camera game with a debounced HSL color classifier",
    long_description="Point the camera at something of the requested color and hold it until the confidence bar fills up",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
