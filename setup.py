from setuptools import setup, find_packages

setup(
    name='clickuTime',
    version='0.1.0',
    description="A CLI tool that shows how much time you tracked in ClickUp today.",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'tabulate',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'clickutime=clickutime.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        'clickutime': ['clickutime.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
