from setuptools import setup, find_packages

setup(
    name='hbasectl',
    version='0.1.0',
    packages=find_packages(include=['hbasectl', 'hbasectl.*']),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'fastapi',
        'uvicorn',
        'python-dotenv',
        'requests'
    ],
    extras_require={
        'test': [
            'pytest',
            'httpx'
        ]
    },
    entry_points={
        'console_scripts': [
            'hbasectl=hbasectl.cli:run'
        ]
    },
    description='HBase cluster administration CLI and API, including 1.x to 2.0 pre-upgrade validation',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
