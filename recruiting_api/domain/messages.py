"""
Every human-readable message the API can put in an error envelope.

Field templates take the field name first; some take extra arguments
(bounds, owner entity name).
"""

BLANK_FIELD = "The field {0} must not be blank."
NULL_FIELD = "The field {0} is required."
LENGTH_RANGE = "The field {0} must have between {1} and {2} characters."
EXACT_LENGTH = "The field {0} must have exactly {1} characters."
FIELD_NOT_LINKED = "The field {0} is not linked to a valid record for {1}."
DOCUMENT_INVALID = "The field {0} is not a valid CPF/CNPJ number."
STATE_INVALID = "The field {0} is not a valid state code."
UNDER_AGE = "The field {0} of {1} must correspond to someone at least 18 years old."
ADDRESS_OWNER = "The address must be linked to exactly one company or one candidate."

SAVE_FAILED = "An error occurred while saving the record."
UPDATE_FAILED = "An error occurred while updating the record."
DELETE_FAILED = "An error occurred while deleting the record."
RECORD_NOT_FOUND = "Record not found."
UNEXPECTED_ERROR = "An unexpected error occurred: {0}"
ID_MISMATCH = "The id in the request path does not match the id of the record in the body."

INVALID_REQUEST = "Invalid request"
NOT_FOUND_TITLE = "Not found"
SERVER_ERROR_TITLE = "Internal server error"
