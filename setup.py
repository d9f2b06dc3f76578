import setuptools

install_requires = [
    "Flask>=2.2",
    "Flask-WTF>=1.1",
    "WTForms>=3.0",
    "flask-talisman>=1.0",
    "bleach>=6.0",
    "MarkupSafe>=2.1",
    "PyYAML",
    "click>=8.0",
]

tests_require = [
    "pytest",
]

dev_requires = tests_require + [
    # For coverage
    "pytest-cov",
    # Test runner
    "nox",
]


def get_long_description():
    with open("README.rst") as fd:
        return fd.read()


setuptools.setup(
    # Metadata
    name="commentboard",
    version="0.1.0.dev0",
    license="LGPL",
    description="A stored XSS demo: a vulnerable and a sanitized, CSP protected comment board, based on Flask",
    long_description=get_long_description(),
    long_description_content_type="text/x-rst",
    platforms="any",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Web Environment",
        "Intended Audience :: Education",
        "License :: OSI Approved :: GNU Lesser General Public License v2 (LGPLv2)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Framework :: Flask",
    ],
    # Data
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    package_data={
        "commentboard": ["web/templates/*.html", "core/*.yml"],
    },
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.8",
    # Requirements & dependencies
    install_requires=install_requires,
    extras_require={
        "tests": tests_require,
        "dev": dev_requires,
    },
    entry_points={
        "console_scripts": ["commentboard = commentboard.cli:main"],
    },
)
