from importlib import metadata
from pathlib import Path

DISTRIBUTION = "compensacao-ambiental-api"


def read_version() -> str:
    """Versão do arquivo VERSION na raiz do repositório ou, instalado como pacote, dos metadados."""
    version_file = Path(__file__).resolve().parents[1] / "VERSION"
    if version_file.exists():
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"
