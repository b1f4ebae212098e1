import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from models.dataset import Dataset
from services.store import DatasetStore

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """Raised when the dataset file cannot be read or does not have the expected shape"""


def load_dataset(path: Union[str, Path]) -> DatasetStore:
    """
    Load users, posts and comments from a JSON document into a store

    :param path: file with top-level "users", "posts" and "comments" arrays
    :return: the populated store
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        dataset = Dataset.model_validate(raw)
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetError(f"Could not read dataset {path}: {e}") from e
    except ValidationError as e:
        raise DatasetError(f"Dataset {path} is malformed: {e}") from e

    logger.info(
        f"Loaded dataset {path}: {len(dataset.users)} users, "
        f"{len(dataset.posts)} posts, {len(dataset.comments)} comments"
    )
    return DatasetStore.from_dataset(dataset)
