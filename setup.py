from setuptools import setup, find_packages

setup(name = "mengersponge",
      version = "0.1.0",
      description = "Menger sponge generator with a rotating software rendered view",
      keywords = "fractal menger sponge rendering",
      license = "GPL",
      packages = find_packages(exclude=["tests", "examples"]),
      install_requires = [
        "numpy",
        "pillow",
        "matplotlib",
        "py-flags",
        ],
      extras_require = {
        "test": [
            "pytest",
            "hypothesis",
            ],
        },
      zip_safe = False,
      )
