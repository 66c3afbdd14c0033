from setuptools import setup, find_packages
setup(
    name = "setquery",
    version = "0.1.0.dev1",
    description = "Lazy set operations over ordered iterables, with pluggable equality",
    author = "Various Developers",
    packages = find_packages(exclude=['tests']),
    install_requires = [
        'attrs',
        ],
    extras_require = {
        'test': ['pytest'],
        },
    python_requires='>=3.7',
    )
