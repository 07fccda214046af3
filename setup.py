from setuptools import setup, find_packages

with open('README.md') as f:
    readme = f.read()

setup(
    name='xhtmlbuilder',
    version='0.1.0',
    description='xhtmlbuilder module',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='Paul Webb',
    author_email='p@technobok.org',
    license='Apache-2.0',
    python_requires='>=3.8',
    packages=find_packages(exclude=('tests', 'docs')),
    extras_require={
        'test': ['pytest'],
    },
)
