from setuptools import setup, find_packages

setup(
    name='rangefold',
    version=open("version.txt").read().strip(),
    packages=find_packages(),
    python_requires=">=3.7",
    license='Apache 2.0',
    install_requires=[req for req in open("requirements.txt").read().split("\n") if len(req) > 0],
    extras_require={"test": ["pytest<9", "numpy"]},
    description='Segment trees with associative range folds and lowest common ancestor queries '
                'over static rooted trees',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: Apache Software License",
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        "Topic :: Scientific/Engineering :: Mathematics",
        "Typing :: Typed"
    ]
)
