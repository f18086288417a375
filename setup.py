from setuptools import setup, find_packages

setup(
    name="pauli-strings",
    version="0.1.0",
    description="Multi-qubit Pauli operators as strings, with exact phase tracking",
    packages=find_packages(include=["pauli_strings", "pauli_strings.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "qiskit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
)
