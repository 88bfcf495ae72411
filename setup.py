import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="dtos",
    version="0.1.0",
    author="Fredrik Feyling",
    author_email="fredrik.feyling@hotmail.com",
    description="Runtime attribute containers (DTOs) with dirty tracking and write policies",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': '.'},
    packages=setuptools.find_packages(include=['dtos', 'dtos.*']),
    python_requires='>=3.10',
    install_requires = [
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
