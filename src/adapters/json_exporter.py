"""Exportación JSON del registro fusionado.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar el resultado sin depender de la salida Rich de la CLI.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import PersonInfo


def person_info_to_json(info: PersonInfo) -> str:
    """Serializa `PersonInfo` manteniendo el orden de campos del modelo."""

    payload = info.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def export_person_info_json(*, info: PersonInfo, output_path: Path) -> Path:
    """Exporta `PersonInfo` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(person_info_to_json(info), encoding="utf-8")
    return output_path
