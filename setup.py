from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="picowallet",
        version="0.1.0",
        description="Picowallet Ed25519 wallet key derivation",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[
            "mnemonic>=0.20",
            "base58>=2.1",
            "PyNaCl>=1.5",
            "blake3>=0.3",
        ],
        extras_require={"test": ["pytest>=7"]},
    )
