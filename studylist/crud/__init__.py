from studylist.crud.study_item import (
    get_study_items,
    replace_study_items
)

__all__ = [
    "get_study_items",
    "replace_study_items",
]
