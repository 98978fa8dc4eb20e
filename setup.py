from setuptools import setup, find_packages

setup(
    name="meme-generator",
    version="0.1.0",
    description="Meme compositing engine with live preview and high-resolution PNG export",
    author="Valerio Galano",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pillow>=11.1.0",
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "meme-generator=meme_generator.cli:main",
        ],
    },
)
