from setuptools import setup, find_packages

setup(
    name="growl",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "PyYAML",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        'dev': [
            'pytest',
            'build',
            'twine',
            'wheel'
        ],
    },
    python_requires='>=3.8',
    description="Run named shell commands from growl.yaml and cross-compile Go programs",
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    entry_points={
        'console_scripts': [
            'growl=growl.main:main',
        ],
    },
)
