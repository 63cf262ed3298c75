"""Reference data — field patterns and the canonical messages shown to users.

Kept in one place so rules, tests, and adapters agree on the exact text.
"""

import re

# ──────────────────────────────────────────────────────────────────────
# FIELD PATTERNS (full-string matches)
# ──────────────────────────────────────────────────────────────────────

NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[6-9][0-9]{9}$")        # Indian mobile numbers
ZIPCODE_PATTERN = re.compile(r"^[1-9][0-9]{5}$")      # Indian PIN codes
USERNAME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*$")


# ──────────────────────────────────────────────────────────────────────
# MESSAGES
# ──────────────────────────────────────────────────────────────────────

REQUIRED_MESSAGE = "{label} is required"
CHOICE_REQUIRED_MESSAGE = "This field is required"

NAME_CHARSET_MESSAGE = "Only letters and spaces are allowed"
NAME_LENGTH_MESSAGE = "Must be at least {min_length} characters long"

EMAIL_MESSAGE = "Please enter a valid email address"
PHONE_MESSAGE = "Enter a valid 10-digit mobile number starting with 6, 7, 8, or 9"
ZIPCODE_MESSAGE = "Enter a valid 6-digit pincode (cannot start with 0)"

USERNAME_PATTERN_MESSAGE = (
    "Username must start with a letter and contain only letters, numbers, underscore, and hyphen"
)
USERNAME_LENGTH_MESSAGE = "Username must be between {min_length} and {max_length} characters"

WEAK_PASSWORD_MESSAGE = "Password must contain uppercase, lowercase, number, and special character"
PASSWORD_MISMATCH_MESSAGE = "Passwords do not match"

INVALID_DATE_MESSAGE = "Please enter a valid date"
FUTURE_DOB_MESSAGE = "Date of birth cannot be in the future"
IMPLAUSIBLE_DOB_MESSAGE = "Please enter a valid date of birth"
PAST_APPOINTMENT_MESSAGE = "Appointment date cannot be in the past"

SUMMARY_HEADER = "Please correct the following errors:"
