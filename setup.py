from setuptools import find_namespace_packages, setup

VERSION = "1.0.0"

requirements = open("requirements.txt").readlines()

if __name__ == "__main__":
    setup(
        name="jarc",
        version=VERSION,
        packages=find_namespace_packages(
            include=["jarc", "jarc.*"],
            exclude=["jarc.templates.tree*", "jarc.templates.info*"],
        ),
        package_data={"jarc.templates": ["tree/**/*", "info/**/*"]},
        license="MIT",
        description="JARC - create hybrid mobile app projects wired to a native bridge toolchain",
        long_description=open("README.md", encoding="utf-8").read(),
        long_description_content_type="text/markdown",
        classifiers=[
            "Development Status :: 4 - Beta",
            "Environment :: Console",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Programming Language :: Python :: 3",
        ],
        install_requires=requirements,
        extras_require={
            "test": ["pytest>=7.4", "pytest-asyncio>=0.23"],
        },
        entry_points={
            "console_scripts": ["jarc=jarc.cli.main:run_jarc"],
        },
        python_requires=">=3.9",
    )
