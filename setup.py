"""
Packaging for comment-extractor

Runtime dependencies live in requirements.txt, the version in
comment_extractor/__init__.py.
"""

import re
from pathlib import Path

from setuptools import setup, find_packages

HERE = Path(__file__).parent


def read_version() -> str:
    init_text = (HERE / 'comment_extractor' / '__init__.py').read_text()
    return re.search(r'^__version__ = "([^"]+)"', init_text, re.M).group(1)


def read_requirements() -> list:
    requirements_file = HERE / 'requirements.txt'
    if not requirements_file.exists():
        return []
    return [
        line.strip()
        for line in requirements_file.read_text().splitlines()
        if line.strip() and not line.startswith('#')
    ]


readme_file = HERE / 'README.md'

setup(
    name='comment-extractor',
    version=read_version(),
    author='comment-extractor contributors',
    description='Pull community comments out of arbitrary pages: embedded script JSON first, DOM selectors as fallback',
    long_description=readme_file.read_text() if readme_file.exists() else '',
    long_description_content_type='text/markdown',
    keywords=['scraping', 'comments', 'html', 'json', 'nextjs', 'beautifulsoup'],
    packages=find_packages(exclude=['tests', 'tests.*', 'examples']),
    python_requires='>=3.8',
    install_requires=read_requirements(),
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'comment-extractor=comment_extractor.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
        'Topic :: Text Processing :: Markup :: HTML',
        'Programming Language :: Python :: 3',
    ],
    zip_safe=False,
)
