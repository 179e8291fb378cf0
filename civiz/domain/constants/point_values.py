"""Point awards granted by the ledger"""


class PointValues:
    """Award constants for point-granting actions"""
    VISION_SUBMISSION = 3
    IMAGE_LIKE_GIVEN = 1
    IMAGE_LIKE_RECEIVED = 1
    FUNDING_SELECTED_BONUS = 10

    @classmethod
    def as_dict(cls) -> dict:
        return {
            "vision_submission": cls.VISION_SUBMISSION,
            "image_like_given": cls.IMAGE_LIKE_GIVEN,
            "image_like_received": cls.IMAGE_LIKE_RECEIVED,
            "funding_selected_bonus": cls.FUNDING_SELECTED_BONUS,
        }
