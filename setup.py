from setuptools import setup

VERSION = "0.4"

setup(
    name="postfix-exporter",
    version=VERSION,
    license="GPL v3",
    description=("Prometheus exporter for the postfix queue and smtpd log"),
    long_description=(""),
    classifiers=[
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: POSIX",
        "Topic :: Communications :: Email :: Mail Transport Agents",
        "Topic :: System :: Monitoring",
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords=["postfix", "prometheus", "exporter", "metrics"],
    zip_safe=False,
    platforms="any",
    python_requires=">=3.11",
    packages=[
        "postfix_exporter", "postfix_exporter.metrics", "postfix_exporter.queue",
        "postfix_exporter.logs", "postfix_exporter.server"
    ],
    install_requires=[
        "aiohttp>=3.9", "async_timeout>=4.0", "prometheus_client>=0.17",
        "pydantic>=2.0", "pydantic-settings>=2.0"
    ],
    extras_require={
        "test": ["pytest>=7.0", "pytest-asyncio>=0.23", "pytest-aiohttp>=1.0"],
    },
    entry_points={
        "console_scripts": ["postfix-exporter=postfix_exporter.__main__:main"],
    },
    include_package_data=True)
