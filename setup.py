from setuptools import setup, find_packages

setup(
    name="css-document",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'cssutils',
        'orjson',
        'typing-extensions>=4.1'
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout',
            'pytest-xdist'
        ]
    },
    entry_points={
        'console_scripts': [
            'css-document=css_document.cli:main'
        ]
    },
    python_requires='>=3.7',
    author="Kenneth Hanks",
    author_email="fourfigs@gmail.com",
    description="Flattens a stylesheet's style rules for inlining and keeps the at-rules that must stay in a <style> element",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    url="https://github.com/fourfigs/css-document",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
