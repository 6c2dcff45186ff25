from setuptools import find_packages, setup

setup(
    name="f3-check",
    version="0.1.0",
    description="以 f3write / f3read 檢測儲存裝置實際容量與速度",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest"]},
)
