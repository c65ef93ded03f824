from setuptools import setup, find_packages
from pathlib import Path

# Read the requirements from requirements.txt
reqs_path = Path(__file__).parent / "requirements.txt"
requirements = [
    line.strip()
    for line in reqs_path.read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

setup(
    name="gear-assets",
    version="0.1.0",
    description="Static asset preparation for gears",
    packages=find_packages(include=["gear_assets", "gear_assets.*"]),
    py_modules=["prep"],
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["gear-assets=prep:main"]},
)
