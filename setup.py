from setuptools import setup, find_packages

setup(
    name="bolan-compare",
    version="0.1.0",
    description="瑞典房貸利率爬取與比較核心功能庫",
    author="ymakhloufi",
    packages=find_packages(exclude=["tests.*", "tests", "example.*", "example"]),
    python_requires=">=3.8",
    install_requires=[
        "aiohttp>=3.8.0",
        "beautifulsoup4>=4.9.3",
        "soupsieve>=2.1",
        "pydantic>=2.0.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-asyncio>=0.17.0",
            "black>=22.0.0",
            "isort>=5.0.0",
            "mypy>=0.900",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Financial and Insurance Industry",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="mortgage, interest rates, crawler, scraping",
    project_urls={
        "Source": "https://github.com/ymakhloufi/bolan-compare",
    }
)
