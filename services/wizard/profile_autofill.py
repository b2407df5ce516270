# -*- coding: utf-8 -*-
"""
Generated test answers for the profile wizard (development mode only).
"""

import random
from datetime import date
from typing import Any, Callable, Dict, Optional

from app.config import Config, ProfileVocabularies as V
from services.wizard import profile_steps as steps

FIRST_NAMES = ("Aarav", "Vivaan", "Aditya", "Ananya", "Diya", "Isha", "Kabir", "Meera", "Rohan", "Saanvi")
LAST_NAMES = ("Sharma", "Verma", "Sahu", "Patel", "Gupta", "Nair", "Iyer", "Yadav", "Singh", "Das")
CITIES = ("Raipur", "Bhilai", "Bilaspur", "Pune", "Mumbai", "Bengaluru", "Delhi", "Jaipur")
COLLEGES = ("NIT Raipur", "Pt. Ravishankar Shukla University", "IIT Bombay", "Delhi University")
COMPANIES = ("Infosys", "Tata Consultancy Services", "SAIL", "Reliance Industries")
DESIGNATIONS = ("Software Engineer", "Analyst", "Manager", "Consultant")
PARENT_OCCUPATIONS = ("Retired", "Teacher", "Farmer", "Business", "Homemaker")


def _basic_info(rng: random.Random) -> Dict[str, Any]:
    today = date.today()
    age = rng.randint(22, 40)
    birth_date = date(today.year - age, rng.randint(1, 12), rng.randint(1, 28))
    return {
        "firstName": rng.choice(FIRST_NAMES),
        "lastName": rng.choice(LAST_NAMES),
        "dateOfBirth": birth_date.strftime(Config.DATE_FORMAT),
        "gender": rng.choice(V.GENDERS),
        "maritalStatus": rng.choice(V.MARITAL_STATUS),
    }


def _location(rng: random.Random) -> Dict[str, Any]:
    state = rng.choice(V.INDIA_STATES)
    answers = {"country": "India", "state": state, "city": rng.choice(CITIES)}
    if state == "Chhattisgarh":
        answers["nativeDistrict"] = rng.choice(V.CHHATTISGARH_DISTRICTS)
    return answers


def _religious_info(rng: random.Random) -> Dict[str, Any]:
    religion = rng.choice(V.RELIGIONS)
    answers = {
        "religion": religion,
        "caste": rng.choice(V.CASTES),
        "subCaste": "",
        "motherTongue": rng.choice(V.MOTHER_TONGUES),
    }
    if religion == "Hindu":
        answers["gothram"] = "Kashyap"
    return answers


def _physical_attributes(rng: random.Random) -> Dict[str, Any]:
    return {
        "height": rng.randint(150, 190),
        "weight": rng.randint(45, 90),
        "complexion": rng.choice(V.COMPLEXIONS),
        "bodyType": rng.choice(V.BODY_TYPES),
        "bloodGroup": rng.choice(V.BLOOD_GROUPS),
    }


def _lifestyle(rng: random.Random) -> Dict[str, Any]:
    return {
        "diet": rng.choice(V.DIETS),
        "smoking": rng.choice(V.SMOKING_HABITS),
        "drinking": rng.choice(V.DRINKING_HABITS),
    }


def _education(rng: random.Random) -> Dict[str, Any]:
    return {
        "highestEducation": rng.choice(V.EDUCATION_LEVELS),
        "fieldOfStudy": rng.choice(V.FIELDS_OF_STUDY),
        "collegeName": rng.choice(COLLEGES),
    }


def _occupation(rng: random.Random) -> Dict[str, Any]:
    occupation = rng.choice(V.OCCUPATIONS)
    answers = {"occupation": occupation, "annualIncome": rng.choice(V.ANNUAL_INCOMES)}
    if occupation in V.EMPLOYED_OCCUPATIONS:
        answers["companyName"] = rng.choice(COMPANIES)
        answers["designation"] = rng.choice(DESIGNATIONS)
    return answers


def _family(rng: random.Random) -> Dict[str, Any]:
    return {
        "fatherName": f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        "fatherOccupation": rng.choice(PARENT_OCCUPATIONS),
        "motherName": f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        "motherOccupation": rng.choice(PARENT_OCCUPATIONS),
        "numberOfBrothers": rng.randint(0, 3),
        "numberOfSisters": rng.randint(0, 3),
        "familyType": rng.choice(V.FAMILY_TYPES),
        "familyStatus": rng.choice(V.FAMILY_STATUS),
    }


def _horoscope(rng: random.Random) -> Dict[str, Any]:
    return {
        "manglik": rng.choice(V.MANGLIK_OPTIONS),
        "birthTime": f"{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}",
        "birthPlace": rng.choice(CITIES),
        "rashi": rng.choice(V.RASHIS),
        "nakshatra": rng.choice(V.NAKSHATRAS),
    }


def _about(rng: random.Random) -> Dict[str, Any]:
    hobbies = rng.sample(V.HOBBY_SUGGESTIONS, 3)
    return {
        "bio": (
            "I am a family-oriented person who values honesty and kindness. "
            f"In my free time I enjoy {hobbies[0].lower()} and spending time with friends."
        ),
        "hobbies": ", ".join(hobbies),
        "interests": "Travel, good food and learning new things",
    }


_GENERATORS: Dict[str, Callable[[random.Random], Dict[str, Any]]] = {
    steps.STEP_BASIC_INFO: _basic_info,
    steps.STEP_LOCATION: _location,
    steps.STEP_RELIGIOUS_INFO: _religious_info,
    steps.STEP_PHYSICAL_ATTRIBUTES: _physical_attributes,
    steps.STEP_LIFESTYLE: _lifestyle,
    steps.STEP_EDUCATION: _education,
    steps.STEP_OCCUPATION: _occupation,
    steps.STEP_FAMILY: _family,
    steps.STEP_HOROSCOPE: _horoscope,
    steps.STEP_ABOUT: _about,
}


def generate_step_answers(step_id: str, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """
    Generate valid answers for one profile step.

    Returns an empty mapping for steps without a generator.
    """
    generator = _GENERATORS.get(step_id)
    if generator is None:
        return {}
    return generator(rng or random.Random())
