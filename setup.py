"""Package build script"""
import setuptools

with open('./VERSION', 'r', encoding='utf-8') as f:
    __version__ = f.read().strip()

if not __version__:
    raise EnvironmentError('Could not find valid version number in VERSION; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geodesy-ellipsoidal",
    version=__version__,
    author="",
    author_email="",
    description="Vincenty geodesics, UTM projection and datum conversion on an ellipsoidal earth.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geodesy*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geodesy": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1',
        'pydantic>=2,<3',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
