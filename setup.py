from setuptools import find_packages, setup

setup(
    name="afflink",
    version="0.1.0",
    description="Affiliate link management for static content repositories",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors its own click; the CLI uses click directly)
        "click",  # Used directly by the CLI entry point
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "jinja2",  # Template rendering for reports
        "python-slugify",  # Slug normalization
        "requests",  # REST store backend
        "pymongo",  # MongoDB store backend
        "mongomock",  # In-memory MongoDB for tests
        "pytest>=7.0",  # Testing framework
        "pytest-timeout>=2.1",  # Test timeouts
    ],
    entry_points={
        "console_scripts": [
            "afflink=afflink.cli:main",
        ],
    },
)
