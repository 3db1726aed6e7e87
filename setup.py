from setuptools import find_packages, setup

setup(
    name="vitone",
    version="0.1.0",
    description="Detach Vietnamese tone marks from precomposed letters",
    entry_points={
        "console_scripts": ["vitone=vitone.__main__:main"],
    },
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "pyyaml>=6.0",
        "unicodedata2>=15.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: Vietnamese",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: General",
    ],
)
