# -*- coding: utf-8 -*-
"""Shared pytest configuration and fixtures."""

import copy
import os

import pytest

# Headless Qt and no log files during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOG_TO_FILE", "false")

LONG_BIO = (
    "I am a calm and cheerful person who loves books, music and long walks."
)

# One valid submission per profile step
VALID_ANSWERS = {
    "basic_info": {
        "firstName": "Asha",
        "lastName": "Sahu",
        "dateOfBirth": "1995-06-15",
        "gender": "Female",
        "maritalStatus": "Never Married",
    },
    "location": {
        "country": "India",
        "state": "Chhattisgarh",
        "city": "Raipur",
        "nativeDistrict": "Durg",
    },
    "religious_info": {
        "religion": "Hindu",
        "caste": "General",
        "gothram": "Kashyap",
        "motherTongue": "Hindi",
    },
    "physical_attributes": {
        "height": "170",
        "weight": "65",
        "complexion": "Fair",
        "bodyType": "Average",
    },
    "lifestyle": {
        "diet": "Vegetarian",
        "smoking": "No",
        "drinking": "No",
    },
    "education": {
        "highestEducation": "Bachelor's Degree",
        "fieldOfStudy": "Engineering",
        "collegeName": "NIT Raipur",
    },
    "occupation": {
        "occupation": "Private Sector",
        "companyName": "Infosys",
        "designation": "Software Engineer",
        "annualIncome": "₹5-7 Lakhs",
    },
    "family": {
        "fatherName": "Ramesh Sahu",
        "motherName": "Sunita Sahu",
        "numberOfBrothers": 1,
        "familyType": "Nuclear",
    },
    "horoscope": {
        "manglik": "No",
        "birthTime": "06:30",
    },
    "about": {
        "bio": LONG_BIO,
        "hobbies": "Reading, Music",
    },
}


@pytest.fixture
def valid_answers():
    """Valid answers for every profile step (fresh copy per test)."""
    return copy.deepcopy(VALID_ANSWERS)


@pytest.fixture
def registry():
    """Registry of the profile steps."""
    from services.wizard.profile_steps import get_profile_registry
    return get_profile_registry()
