from setuptools import find_namespace_packages, setup

setup(
    name='imgsizes',
    version='0.1.0',
    description='Parsing of the HTML `sizes` attribute, selecting the size applicable for the current viewport',
    python_requires='>=3.10',
    package_dir={ '': 'src' },
    packages=find_namespace_packages(where='src', include=('imgsizes', 'imgsizes.*')), # Namespace packages (e.g. `imgsizes.syntax`, which has no `__init__.py`) are only found with the "namespace" variant of the finder
    extras_require={ 'test': [ 'pytest' ] },
    entry_points={ 'console_scripts': [ 'imgsizes = imgsizes.__main__:main' ] },
)
