"""
Generic CRUD service for entities stored in one collection each.

Subclasses declare a label, currency fields and the references they hold;
the list/get/create/update flow is shared.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Tuple

from pydantic import BaseModel

from app.exceptions import NotFoundError
from core.base.base_service import BaseService
from core.utils.helpers import utc_now
from domain.schemas.common import clean_update
from repositories.base import BaseRepository, Document
from services.updates import (
    build_new_document,
    build_set_document,
    update_result_to_dict,
)


class EntityService(BaseService[BaseRepository]):
    entity_label: str = "Record"
    money_fields: Tuple[str, ...] = ()

    def __init__(self, repository: BaseRepository, logger_name: str):
        super().__init__(repository, logger_name)
        # field name -> (repository holding the referenced entity, label)
        self.references: Dict[str, Tuple[BaseRepository, str]] = {}

    @property
    def id_field(self) -> str:
        return self.repository.id_field

    # ------------------ Hooks ------------------
    def validate_fields(self, fields: Mapping[str, Any], creating: bool) -> None:
        """Entity-specific rules beyond the request schema"""

    def prepare_create(self, fields: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        """Fill server-side defaults before a create is stamped"""
        return fields

    # ------------------ Reference checks ------------------
    def check_references(self, fields: Mapping[str, Any]) -> None:
        """
        Confirm every referenced entity named in ``fields`` exists.

        Raises:
            NotFoundError: on the first missing reference; nothing is written
        """
        for field_name, (repository, label) in self.references.items():
            referenced_id = fields.get(field_name)
            if referenced_id is None:
                continue
            if not repository.exists(referenced_id):
                self.log_warning(
                    f"{label} reference missing", field=field_name, value=referenced_id
                )
                raise NotFoundError(f"{label} {referenced_id} not found")

    # ------------------ Operations ------------------
    def list_all(self) -> List[Document]:
        return self.repository.get_all()

    def get(self, entity_id: str) -> Document:
        document = self.repository.get_by_id(entity_id)
        if document is None:
            raise NotFoundError(f"{self.entity_label} {entity_id} not found")
        return document

    def create(self, payload: BaseModel) -> Dict[str, str]:
        """
        Validate references, stamp identity and timestamps, then insert.

        Returns:
            Dict with the storage id (``inserted_id``) and business id (``entity_id``)
        """
        fields = payload.model_dump(exclude_none=True)
        self.validate_fields(fields, creating=True)
        self.check_references(fields)

        now = utc_now()
        document = build_new_document(
            self.prepare_create(fields, now),
            self.id_field,
            now,
            self.money_fields,
        )
        inserted_id = self.repository.create(document)
        self.log_info(
            f"{self.entity_label} created", **{self.id_field: document[self.id_field]}
        )
        return {"inserted_id": inserted_id, "entity_id": document[self.id_field]}

    def update(self, entity_id: str, payload: BaseModel) -> Dict[str, Any]:
        """
        Apply a sparse update with upsert semantics.

        An unknown ``entity_id`` creates a new document carrying that id.
        """
        fields = clean_update(payload)
        self.validate_fields(fields, creating=False)
        self.check_references(fields)

        now = utc_now()
        set_document = build_set_document(fields, now, self.money_fields)
        result = self.repository.upsert(
            entity_id, set_document, on_insert={"created_at": now}
        )
        summary = update_result_to_dict(result)
        if summary["upserted_id"] is not None:
            self.log_info(
                f"{self.entity_label} upserted", **{self.id_field: entity_id}
            )
        else:
            self.log_info(
                f"{self.entity_label} updated",
                **{self.id_field: entity_id},
                fields=",".join(sorted(set_document)),
            )
        return summary
