#!/usr/bin/env python3
"""
Cria as tabelas do banco (normas, tipos_compensacao, modalidades,
normas_tipos_compensacao) se ainda não existirem.

Não é um sistema de migrações: tabelas existentes não são alteradas.

Uso:
  python scripts/init_db.py          # apenas cria as tabelas
  python scripts/init_db.py --seed   # cria e insere dados de exemplo (se vazio)
"""
from __future__ import annotations

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from compensacao.config import get_settings  # noqa: E402
from compensacao.db import Database  # noqa: E402
from compensacao.repositories import (  # noqa: E402
    ModalidadesRepository,
    NormasRepository,
    NormasTiposRepository,
    TiposRepository,
)

SEED_NORMAS = [
    {
        "nome": "Lei Federal nº 9.985/2000",
        "link": "https://www.planalto.gov.br/ccivil_03/leis/l9985.htm",
        "preambulo": "Institui o Sistema Nacional de Unidades de Conservação da Natureza - SNUC.",
    },
]

SEED_MODALIDADES = [
    {
        "nome": "Pagamento",
        "proporcao": "Até 0,5% do valor de referência do empreendimento.",
        "forma": "Depósito em conta específica.",
    },
]


def seed(db) -> None:
    tipos = TiposRepository(db)
    if tipos.count():
        print("ℹ️  Banco já possui dados; seed ignorado")
        return
    tipo_id = tipos.create({"nome": "SNUC"})
    for modalidade in SEED_MODALIDADES:
        ModalidadesRepository(db).create({**modalidade, "tipo_id": tipo_id})
    for norma in SEED_NORMAS:
        norma_id = NormasRepository(db).create(norma)
        NormasTiposRepository(db).create({"tipo_id": tipo_id, "norma_id": norma_id})
    print("✅ Dados de exemplo inseridos")


def main(argv: list[str]) -> int:
    database = Database(get_settings().database_url)
    print(f"📊 URL: {database.masked_url}")
    try:
        database.create_all()
        print("✅ Tabelas criadas/verificadas")
        if "--seed" in argv:
            with database.session() as db:
                seed(db)
        return 0 if database.check_connection() else 1
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
