from setuptools import setup, find_packages

setup(
    name='shiftlog',
    version='0.1.0',
    description='A CLI tool for logging clock-in/clock-out shifts per job and summarizing the hours worked.',
    author='René Lachmann',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'tabulate',
        'python-dotenv',
        'markdown',
    ],
    entry_points={
        'console_scripts': [
            'shiftlog=shiftlog.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['shiftlog.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
