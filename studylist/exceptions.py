class StudyListError(Exception):
    """Base error for study list operations"""


class InvalidStateError(StudyListError):
    """Raised when an event is applied to an item in the wrong state"""

    def __init__(self, item_id: str, message: str):
        super().__init__(f"{message} (item {item_id})")
        self.item_id = item_id


class ItemNotFoundError(StudyListError, KeyError):
    """Raised when no item with the given id exists"""

    def __init__(self, item_id: str):
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self):
        return f"Study item {self.item_id} not found"
