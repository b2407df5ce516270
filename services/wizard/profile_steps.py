# -*- coding: utf-8 -*-
"""
Profile creation steps.

Declares the steps of the profile wizard, in order:
- Step 1: Basic Info
- Step 2: Location
- Step 3: Religious Info
- Step 4: Physical Attributes
- Step 5: Lifestyle
- Step 6: Education
- Step 7: Occupation
- Step 8: Family
- Step 9: Horoscope
- Step 10: About
"""

from functools import lru_cache

from app.config import ProfileVocabularies as V
from models.step_schema import ConditionalRule, FieldEffect, FieldSpec, FieldType, StepSchema
from services.wizard.step_registry import StepRegistry

# Step ids
STEP_BASIC_INFO = "basic_info"
STEP_LOCATION = "location"
STEP_RELIGIOUS_INFO = "religious_info"
STEP_PHYSICAL_ATTRIBUTES = "physical_attributes"
STEP_LIFESTYLE = "lifestyle"
STEP_EDUCATION = "education"
STEP_OCCUPATION = "occupation"
STEP_FAMILY = "family"
STEP_HOROSCOPE = "horoscope"
STEP_ABOUT = "about"


BASIC_INFO_STEP = StepSchema(
    id=STEP_BASIC_INFO,
    title="Basic Information",
    fields=(
        FieldSpec("firstName", FieldType.TEXT, "First name", True, max_length=50),
        FieldSpec("lastName", FieldType.TEXT, "Last name", True, max_length=50),
        FieldSpec("dateOfBirth", FieldType.DATE, "Date of birth", True, min_age=18, max_age=80),
        FieldSpec("gender", FieldType.SINGLE_CHOICE, "Gender", True, options=V.GENDERS),
        FieldSpec("maritalStatus", FieldType.SINGLE_CHOICE, "Marital status", True,
                  options=V.MARITAL_STATUS),
    ),
)

LOCATION_STEP = StepSchema(
    id=STEP_LOCATION,
    title="Location",
    fields=(
        FieldSpec("country", FieldType.SINGLE_CHOICE, "Country", True, options=V.COUNTRIES),
        # Free text unless the country restricts it to a fixed list
        FieldSpec("state", FieldType.TEXT, "State", True, min_length=2),
        FieldSpec("city", FieldType.TEXT, "City", True, min_length=2),
        FieldSpec("nativeDistrict", FieldType.SINGLE_CHOICE, "Native district",
                  options=V.CHHATTISGARH_DISTRICTS),
    ),
    conditional_rules=(
        ConditionalRule(
            trigger="country",
            values=("India",),
            effects=(FieldEffect("state", options=V.INDIA_STATES),),
        ),
        ConditionalRule(
            trigger="state",
            values=("Chhattisgarh",),
            negate=True,
            effects=(FieldEffect("nativeDistrict", visible=False),),
        ),
    ),
)

RELIGIOUS_INFO_STEP = StepSchema(
    id=STEP_RELIGIOUS_INFO,
    title="Religious Information",
    fields=(
        FieldSpec("religion", FieldType.SINGLE_CHOICE, "Religion", True, options=V.RELIGIONS),
        FieldSpec("caste", FieldType.SINGLE_CHOICE, "Caste", True, options=V.CASTES),
        FieldSpec("subCaste", FieldType.TEXT, "Sub-caste", max_length=100),
        FieldSpec("gothram", FieldType.TEXT, "Gothram", max_length=100),
        FieldSpec("motherTongue", FieldType.SINGLE_CHOICE, "Mother tongue", True,
                  options=V.MOTHER_TONGUES),
    ),
    conditional_rules=(
        ConditionalRule(
            trigger="religion",
            values=("Hindu",),
            negate=True,
            effects=(FieldEffect("gothram", visible=False),),
        ),
    ),
)

PHYSICAL_ATTRIBUTES_STEP = StepSchema(
    id=STEP_PHYSICAL_ATTRIBUTES,
    title="Physical Attributes",
    fields=(
        FieldSpec("height", FieldType.NUMBER, "Height", True,
                  min_value=120, max_value=250, unit="cm"),
        FieldSpec("weight", FieldType.NUMBER, "Weight", True,
                  min_value=30, max_value=200, unit="kg"),
        FieldSpec("complexion", FieldType.SINGLE_CHOICE, "Complexion", True,
                  options=V.COMPLEXIONS),
        FieldSpec("bodyType", FieldType.SINGLE_CHOICE, "Body type", True, options=V.BODY_TYPES),
        FieldSpec("bloodGroup", FieldType.SINGLE_CHOICE, "Blood group", options=V.BLOOD_GROUPS),
    ),
)

LIFESTYLE_STEP = StepSchema(
    id=STEP_LIFESTYLE,
    title="Lifestyle",
    fields=(
        FieldSpec("diet", FieldType.SINGLE_CHOICE, "Diet preference", True, options=V.DIETS),
        FieldSpec("smoking", FieldType.SINGLE_CHOICE, "Smoking habit", True,
                  options=V.SMOKING_HABITS),
        FieldSpec("drinking", FieldType.SINGLE_CHOICE, "Drinking habit", True,
                  options=V.DRINKING_HABITS),
    ),
)

EDUCATION_STEP = StepSchema(
    id=STEP_EDUCATION,
    title="Education",
    fields=(
        FieldSpec("highestEducation", FieldType.SINGLE_CHOICE, "Highest education", True,
                  options=V.EDUCATION_LEVELS),
        FieldSpec("fieldOfStudy", FieldType.SINGLE_CHOICE, "Field of study", True,
                  options=V.FIELDS_OF_STUDY),
        FieldSpec("collegeName", FieldType.TEXT, "College/university name", True,
                  min_length=2, max_length=150),
    ),
)

OCCUPATION_STEP = StepSchema(
    id=STEP_OCCUPATION,
    title="Occupation",
    fields=(
        FieldSpec("occupation", FieldType.SINGLE_CHOICE, "Occupation type", True,
                  options=V.OCCUPATIONS),
        FieldSpec("companyName", FieldType.TEXT, "Company/business name", max_length=150),
        FieldSpec("designation", FieldType.TEXT, "Designation", max_length=100),
        FieldSpec("annualIncome", FieldType.SINGLE_CHOICE, "Annual income", True,
                  options=V.ANNUAL_INCOMES),
    ),
    conditional_rules=(
        ConditionalRule(
            trigger="occupation",
            values=V.EMPLOYED_OCCUPATIONS,
            effects=(
                FieldEffect("companyName", visible=True, required=True),
                FieldEffect("designation", visible=True, required=True),
            ),
        ),
        ConditionalRule(
            trigger="occupation",
            values=V.EMPLOYED_OCCUPATIONS,
            negate=True,
            effects=(
                FieldEffect("companyName", visible=False),
                FieldEffect("designation", visible=False),
            ),
        ),
        ConditionalRule(
            trigger="occupation",
            values=V.NON_EARNING_OCCUPATIONS,
            effects=(FieldEffect("annualIncome", required=False),),
        ),
    ),
)

FAMILY_STEP = StepSchema(
    id=STEP_FAMILY,
    title="Family Details",
    fields=(
        FieldSpec("fatherName", FieldType.TEXT, "Father's name", True, max_length=100),
        FieldSpec("fatherOccupation", FieldType.TEXT, "Father's occupation", max_length=100),
        FieldSpec("motherName", FieldType.TEXT, "Mother's name", True, max_length=100),
        FieldSpec("motherOccupation", FieldType.TEXT, "Mother's occupation", max_length=100),
        FieldSpec("numberOfBrothers", FieldType.NUMBER, "Number of brothers",
                  min_value=0, max_value=20),
        FieldSpec("numberOfSisters", FieldType.NUMBER, "Number of sisters",
                  min_value=0, max_value=20),
        FieldSpec("familyType", FieldType.SINGLE_CHOICE, "Family type", options=V.FAMILY_TYPES),
        FieldSpec("familyStatus", FieldType.SINGLE_CHOICE, "Family status",
                  options=V.FAMILY_STATUS),
    ),
)

HOROSCOPE_STEP = StepSchema(
    id=STEP_HOROSCOPE,
    title="Horoscope Details",
    fields=(
        FieldSpec("manglik", FieldType.SINGLE_CHOICE, "Manglik", options=V.MANGLIK_OPTIONS),
        FieldSpec("birthTime", FieldType.TIME, "Birth time"),
        FieldSpec("birthPlace", FieldType.TEXT, "Birth place", max_length=100),
        FieldSpec("rashi", FieldType.SINGLE_CHOICE, "Rashi", options=V.RASHIS),
        FieldSpec("nakshatra", FieldType.SINGLE_CHOICE, "Nakshatra", options=V.NAKSHATRAS),
    ),
)

ABOUT_STEP = StepSchema(
    id=STEP_ABOUT,
    title="About Yourself",
    fields=(
        FieldSpec("bio", FieldType.TEXT, "Bio", True, min_length=50, max_length=500),
        FieldSpec("hobbies", FieldType.TEXT, "Hobbies", True, max_length=200),
        FieldSpec("interests", FieldType.TEXT, "Interests", max_length=200),
    ),
)


PROFILE_STEPS = (
    BASIC_INFO_STEP,
    LOCATION_STEP,
    RELIGIOUS_INFO_STEP,
    PHYSICAL_ATTRIBUTES_STEP,
    LIFESTYLE_STEP,
    EDUCATION_STEP,
    OCCUPATION_STEP,
    FAMILY_STEP,
    HOROSCOPE_STEP,
    ABOUT_STEP,
)


@lru_cache(maxsize=None)
def get_profile_registry() -> StepRegistry:
    """
    Build the registry of profile steps (once per process).

    Raises:
        SchemaConfigurationError: If the step declarations are inconsistent
    """
    return StepRegistry(PROFILE_STEPS)
