"""Conversion factors, unit choices, field names and validation messages."""

# Unit conversion constants
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12
LBS_PER_KG = 2.20462

# Weight conversions keep one decimal place
WEIGHT_DECIMALS = 1

# Unit choices per dimension (first entry is the default selection)
HEIGHT_UNITS = ("cm", "ft")
WEIGHT_UNITS = ("kg", "lbs")
DEFAULT_HEIGHT_UNIT = HEIGHT_UNITS[0]
DEFAULT_WEIGHT_UNIT = WEIGHT_UNITS[0]

UNIT_LABELS = {
    "cm": "CM",
    "ft": "Ft",
    "kg": "Kg",
    "lbs": "Lbs",
}

# Form fields tracked by the rule set, in display order
FORM_FIELDS = (
    "full_name",
    "mobile_number",
    "email",
    "date_of_birth",
    "height",
    "weight",
)

# Fields that may be left blank
OPTIONAL_FIELDS = ("email",)

# Unit-level inputs feeding the height/weight fields
UNIT_INPUTS = {
    "height_cm": ("height", "cm"),
    "height_ft": ("height", "ft"),
    "height_in": ("height", "ft"),
    "weight_kg": ("weight", "kg"),
    "weight_lbs": ("weight", "lbs"),
}

MOBILE_NUMBER_LENGTH = 10

# User-facing validation messages
MESSAGES = {
    "full_name_required": "Full name is required",
    "mobile_length": f"Mobile number must be exactly {MOBILE_NUMBER_LENGTH} digits",
    "mobile_digits": "Mobile number should only contain digits",
    "email_invalid": "Invalid email format",
    "dob_required": "Date of birth is required",
    "dob_invalid": "Invalid date",
    "height_numeric": "Height should be numeric",
    "weight_numeric": "Weight should be numeric",
    "unknown_field": "Unknown field",
}

# Labels used by the submission summary
FIELD_LABELS = {
    "full_name": "Full Name",
    "mobile_number": "Mobile Number",
    "email": "Email",
    "date_of_birth": "Date of Birth",
    "height": "Height",
    "weight": "Weight",
}

EMAIL_NOT_PROVIDED = "Not provided"
