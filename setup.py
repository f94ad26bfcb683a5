from setuptools import setup

description = "HyperLogLog distinct counter"


setup(
    name="hyperloglog",
    version="v0.1.0",
    packages=["hyperloglog"],
    description=description,
    python_requires=">=3.7",
    install_requires=[
        "xxhash<4",
        "typing_extensions",
    ],
    zip_safe=False,
    extras_require={
        "tests": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.7",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
)
