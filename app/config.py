# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_DEV_MODE = os.getenv("PROFILE_WIZARD_DEV_MODE", "false").lower() in ("true", "1", "yes")
_LOG_DIR = os.getenv("LOG_DIR", None)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Profile Wizard"
    APP_TITLE: str = "Matrimony Profile Creation Wizard"
    VERSION: str = "1.0.0"

    # Development Mode
    # Enables autofill of the whole wizard with generated answers
    DEV_MODE: bool = _DEV_MODE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOG_DIR) if _LOG_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "profile_wizard.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_TO_FILE: bool = _LOG_TO_FILE

    # Session reference numbers
    REFERENCE_PREFIX: str = "PRF"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    TIME_FORMAT: str = "%H:%M"
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# Option lists offered by the profile steps
class ProfileVocabularies:
    GENDERS = ("Male", "Female", "Other")

    MARITAL_STATUS = (
        "Never Married",
        "Divorced",
        "Widowed",
        "Awaiting Divorce",
    )

    COUNTRIES = ("India", "USA", "UK", "Canada", "Australia", "UAE")

    # Fixed state list used when the country is India
    INDIA_STATES = (
        "Chhattisgarh",
        "Maharashtra",
        "Delhi",
        "Karnataka",
        "Tamil Nadu",
        "Gujarat",
        "Rajasthan",
        "Uttar Pradesh",
        "West Bengal",
        "Madhya Pradesh",
        "Other",
    )

    CHHATTISGARH_DISTRICTS = (
        "Balod", "Baloda Bazar", "Balrampur", "Bastar", "Bemetara", "Bijapur",
        "Bilaspur", "Dantewada", "Dhamtari", "Durg", "Gariaband",
        "Gaurela-Pendra-Marwahi", "Janjgir-Champa", "Jashpur", "Kabirdham",
        "Kanker", "Kondagaon", "Korba", "Koriya", "Mahasamund", "Mungeli",
        "Narayanpur", "Raigarh", "Raipur", "Rajnandgaon", "Sukma", "Surajpur",
        "Surguja",
    )

    RELIGIONS = ("Hindu", "Muslim", "Christian", "Sikh", "Jain", "Buddhist", "Other")

    CASTES = ("General", "OBC", "SC", "ST", "Other")

    MOTHER_TONGUES = (
        "Chhattisgarhi", "Hindi", "English", "Bengali", "Telugu", "Marathi",
        "Tamil", "Gujarati", "Urdu", "Kannada", "Odia", "Malayalam",
        "Punjabi", "Other",
    )

    COMPLEXIONS = ("Very Fair", "Fair", "Wheatish", "Dusky", "Dark")

    BODY_TYPES = ("Slim", "Average", "Athletic", "Heavy")

    BLOOD_GROUPS = ("O+", "A+", "B+", "AB+", "O-", "A-", "B-", "AB-")

    DIETS = ("Vegetarian", "Non-Vegetarian", "Eggetarian", "Vegan")

    SMOKING_HABITS = ("No", "Yes", "Occasionally")

    DRINKING_HABITS = ("No", "Yes", "Socially", "Occasionally")

    EDUCATION_LEVELS = (
        "High School",
        "Diploma",
        "Bachelor's Degree",
        "Master's Degree",
        "Doctorate (PhD)",
        "Professional Degree",
    )

    FIELDS_OF_STUDY = (
        "Engineering", "Medicine", "Commerce", "Arts", "Science", "Law",
        "Management", "Computer Science", "Architecture", "Pharmacy",
        "Agriculture", "Education", "Other",
    )

    OCCUPATIONS = (
        "Private Sector",
        "Government",
        "Business/Self-Employed",
        "Freelancer",
        "Not Working",
        "Student",
        "Homemaker",
    )

    # Occupations that have an employer and a role
    EMPLOYED_OCCUPATIONS = ("Private Sector", "Government", "Business/Self-Employed")

    # Occupations without a regular income
    NON_EARNING_OCCUPATIONS = ("Not Working", "Student", "Homemaker")

    ANNUAL_INCOMES = (
        "Below ₹3 Lakhs",
        "₹3-5 Lakhs",
        "₹5-7 Lakhs",
        "₹7-10 Lakhs",
        "₹10-15 Lakhs",
        "₹15-20 Lakhs",
        "₹20-30 Lakhs",
        "Above ₹30 Lakhs",
        "Prefer not to say",
    )

    FAMILY_TYPES = ("Nuclear", "Joint")

    FAMILY_STATUS = ("Middle Class", "Upper Middle", "Rich", "Affluent")

    MANGLIK_OPTIONS = ("Yes", "No", "Don't Know")

    RASHIS = (
        "Mesh (Aries)",
        "Vrishabh (Taurus)",
        "Mithun (Gemini)",
        "Kark (Cancer)",
        "Simha (Leo)",
        "Kanya (Virgo)",
        "Tula (Libra)",
        "Vrishchik (Scorpio)",
        "Dhanu (Sagittarius)",
        "Makar (Capricorn)",
        "Kumbh (Aquarius)",
        "Meen (Pisces)",
    )

    NAKSHATRAS = (
        "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
        "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni",
        "Uttara Phalguni", "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha",
        "Jyeshtha", "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana",
        "Dhanishta", "Shatabhisha", "Purva Bhadrapada", "Uttara Bhadrapada",
        "Revati",
    )

    HOBBY_SUGGESTIONS = (
        "Reading", "Cooking", "Traveling", "Music", "Dancing", "Sports", "Yoga",
        "Gardening", "Photography", "Movies", "Art", "Writing", "Gaming",
        "Fitness", "Meditation",
    )
