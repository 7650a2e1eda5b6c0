from setuptools import setup, find_packages

setup(
    name="youtube_transcripts",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "aiohttp>=3.9",
        "colorlog>=6.7",
        "python-dotenv>=1.0",
        "fastapi>=0.100",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "youtube-transcripts=youtube_transcripts.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Transcript acquisition engine for YouTube timedtext captions",
    author="Venkatesh Murugadas",
)
