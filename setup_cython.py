"""
Setup script for Cythonizing the countableset container.

This script compiles countableset/countable_set.py using Cython
for performance optimization. The pure Python module keeps working
when the extension is not built.

Usage:
    python setup_cython.py build_ext --inplace
"""
from setuptools import setup, Extension
from Cython.Build import cythonize

extensions = [
    Extension("countableset.countable_set", ["countableset/countable_set.py"]),
]

setup(
    name="countableset-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            'language_level': '3',
            'annotation_typing': False,
            'boundscheck': False,
            'wraparound': False,
            'embedsignature': True,
            'optimize.unpack_method_calls': True,
        },
        annotate=True,  # Generate HTML annotation files
    ),
)
