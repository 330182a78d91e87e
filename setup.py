import os

from setuptools import setup, find_packages


# Set BBLAST_CYTHONIZE=1 to compile the counting and scoring hot paths
def build_extensions():
    if os.environ.get("BBLAST_CYTHONIZE") != "1":
        return []

    from Cython.Build import cythonize
    from setuptools import Extension
    import numpy as np

    extensions = [
        Extension(
            name="bblast.hashing.hash",         # full dotted module path
            sources=["bblast/hashing/hash.py"],
            include_dirs=[np.get_include()],
        ),
        Extension(
            name="bblast.kmers.counter",
            sources=["bblast/kmers/counter.py"],
            include_dirs=[np.get_include()],
        ),
        Extension(
            name="bblast.matrix.builder",
            sources=["bblast/matrix/builder.py"],
            include_dirs=[np.get_include()],
        ),
    ]
    return cythonize(
        extensions,
        compiler_directives={"language_level": "3"},
    )


setup(
    name="bblast",
    version="0.1.0",
    description="Alignment-free D2 k-mer comparison of nucleotide sequence sets",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "psutil",
        "fastapi",
        "pydantic",
        "python-multipart",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
        "cython": [
            "Cython",
        ],
    },
    entry_points={
        "console_scripts": [
            "bblast=bblast.main:main",
        ],
    },
    ext_modules=build_extensions(),
    zip_safe=False,
)
