"""Product domain constants.

Error codes let callers tell apart which partial update or which
constraint failed without parsing exception messages.
"""

from django.db import models


class ProductUpdateErrorCode(models.IntegerChoices):
    FAILED_UPDATE_PRICES = 10, "Failed to update prices"
    FAILED_UPDATE_DETAILS = 20, "Failed to update details"
    FAILED_UPDATE_OPTIONS = 30, "Failed to update options"


class ProductConstraintCode(models.IntegerChoices):
    INVALID_ID = 10, "Invalid product id"
    INVALID_FIELD = 20, "Invalid product field"


EAN13_MAX_LENGTH = 13
REFERENCE_MAX_LENGTH = 64
NAME_MAX_LENGTH = 128
