from os.path import dirname, join
from setuptools import setup, find_packages

version = '0.1.0'

dir = dirname(__file__)

with open(join(dir, 'requirements.txt'), 'r') as f:
    install_requires = [ line.rstrip('\n') for line in f.readlines() if line.strip() ]

setup(
    name='nodian',
    version=version,
    description='Note workspace tree model and calendar event ledger',
    long_description=open(join(dir, 'README.md'), 'r').read(),
    long_description_content_type='text/markdown',
    license='Apache License 2.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.10',
    entry_points='''
        [console_scripts]
        nodian=nodian.cli:cli
        nodian-server=nodian.server:main
    ''',
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
)
