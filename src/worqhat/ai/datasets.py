"""
Dataset management for AiCon large answering.
"""

import json
from typing import Any, Dict, List, Optional, Union

from ..config import get_logger
from ..core.validation import is_missing, require_fields, validate_choice
from ..exceptions import InvalidInputError
from .base import Endpoint, FilePart, field_part

logger = get_logger("ai.datasets")

DATASET_TYPES = ("self", "org")


class Datasets(Endpoint):
    async def list(self) -> Dict[str, Any]:
        return await self._client.request("GET", "/api/list-datasets", action="List Datasets")

    async def delete(self, dataset_id: Optional[str] = None) -> Dict[str, Any]:
        require_fields([("Dataset ID", dataset_id)])
        logger.debug("Deleting dataset %s", dataset_id)
        return await self._client.request(
            "DELETE", f"/api/delete-datasets/{dataset_id}", action="Delete Dataset"
        )

    async def train(
        self,
        dataset_name: Optional[str] = None,
        dataset_type: Optional[str] = None,
        dataset_id: Optional[str] = None,
        json_data: Union[str, Dict[str, Any], List[Any], None] = None,
        training_file: Any = None,
    ) -> Dict[str, Any]:
        """Upload training data for a new or existing dataset.

        Either ``json_data`` or ``training_file`` must be given. Passing a
        ``dataset_id`` adds the data to an existing dataset.
        """
        require_fields([("Dataset name", dataset_name), ("Dataset type", dataset_type)])
        kind = validate_choice("Dataset type", dataset_type, DATASET_TYPES)
        if is_missing(json_data) and is_missing(training_file):
            raise InvalidInputError(
                "Either json_data or training_file is required",
                {"field": "json_data"},
            )

        if json_data is not None and not isinstance(json_data, str):
            json_data = json.dumps(json_data)

        files: List[FilePart] = []
        if not is_missing(training_file):
            files.append(
                await self._file_part(
                    "training_file", training_file, "training_file", "application/octet-stream"
                )
            )
        elif json_data is not None:
            # httpx only encodes multipart when at least one part is in files
            files.append(field_part("json_data", json_data))
            json_data = None

        return await self._post_form(
            "/api/datasets/train-datasets",
            files,
            action="Train Dataset",
            fields={
                "datasetId": dataset_id,
                "dataset_name": dataset_name,
                "dataset_type": kind,
                "json_data": json_data,
            },
        )
