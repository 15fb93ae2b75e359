# src/flowbridge/core/serializer.py
"""
Codificação de `TargetDocument` no formato de transporte.

Os três payloads (definição, layout e conexões) são codificados como
strings JSON embutidas no objeto JSON externo.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from flowbridge.core.assembler import TargetDocument


def _dumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def document_to_dict(doc: TargetDocument) -> Dict[str, str]:
    return {
        "projectName": doc.project_name,
        "processDefinitionName": doc.name,
        "processDefinitionDescription": doc.description,
        "processDefinitionJson": _dumps(doc.definition),
        "processDefinitionLocations": _dumps(doc.locations),
        "processDefinitionConnects": _dumps(doc.connects),
    }


def serialize_document(doc: TargetDocument) -> str:
    return _dumps(document_to_dict(doc))


def serialize_documents(docs: Iterable[TargetDocument]) -> List[str]:
    return [serialize_document(doc) for doc in docs]
