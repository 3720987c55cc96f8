"""
Setup script for feed-catcher package.
"""

from setuptools import setup, find_packages

setup(
    name='feed-catcher',
    version='0.1.0',
    description='Download the videos of an RSS feed into a folder per series',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'feedparser',
        'requests',
        'tqdm',  # For progress bars
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires='>=3.7',
    entry_points={
        'console_scripts': [
            'feed-catcher=feed_catcher.cli:main',
        ],
    },
)
