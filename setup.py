from pathlib import Path
from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    for line in (HERE / "src" / "tildetpl" / "__init__.py").read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("No se encontró __version__ en src/tildetpl/__init__.py")


setup(
    name="tildetpl",
    version=_read_version(),
    description="Micro-motor de interpolación ~{expr} para cadenas y estructuras anidadas",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
)
