# #!/usr/bin/env python

"""setup.py script for py_dimensional library"""

from setuptools import setup

setup(
    name='py_dimensional',
    version='0.1.0',
    description='Dimension-aware arithmetic on plain numeric values',
    packages=['py_dimensional'],
    package_data={'py_dimensional': ['assets/*.toml', 'assets/.*.toml']},
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=[
        'typing_extensions>=4.12.2',
        "tomli>=2.0.1; python_version<'3.11'",
    ],
    extras_require={
        'dev': [
            'pytest',
        ],
    },
)
