"""Enumeration types for careerpath models."""

from enum import Enum


class WizardStage(int, Enum):
    """Wizard stages, in the order the user walks through them."""

    EDUCATION = 1
    SKILLS = 2
    PREFERENCES = 3
    RESULTS = 4

    @property
    def title(self) -> str:
        return _STAGE_TITLES[self][0]

    @property
    def description(self) -> str:
        return _STAGE_TITLES[self][1]


_STAGE_TITLES = {
    WizardStage.EDUCATION: (
        "Education Background",
        "Tell us about your educational qualification",
    ),
    WizardStage.SKILLS: (
        "Skills & Experience",
        "What skills have you developed?",
    ),
    WizardStage.PREFERENCES: (
        "Career Preferences",
        "What type of career interests you?",
    ),
    WizardStage.RESULTS: (
        "Your Career Recommendations",
        "Based on the Indian job market, here are your best career matches",
    ),
}


class EducationLevel(str, Enum):
    """Highest educational qualification."""

    TENTH_PASS = "10th Pass"
    TWELFTH_PASS = "12th Pass"
    DIPLOMA = "Diploma/ITI"
    BACHELOR = "Bachelor's Degree"
    MASTER = "Master's Degree"
    PROFESSIONAL = "Professional Degree (CA/CS/Engineering)"
    PHD = "PhD/Research"
    OTHER = "Other"


class Skill(str, Enum):
    """Skills offered on the skills stage."""

    COMMUNICATION = "Communication Skills"
    COMPUTER_IT = "Computer/IT Skills"
    SALES_MARKETING = "Sales & Marketing"
    TEACHING = "Teaching & Training"
    CUSTOMER_SERVICE = "Customer Service"
    DATA_ANALYSIS = "Data Analysis"
    PROJECT_MANAGEMENT = "Project Management"
    TECHNICAL = "Technical/Engineering"
    CREATIVE = "Creative/Design"
    FINANCIAL_PLANNING = "Financial Planning"
    HEALTHCARE = "Healthcare/Medical"
    LANGUAGE = "Language Skills"
    DIGITAL_MARKETING = "Digital Marketing"
    CONTENT_WRITING = "Content Writing"


class InterestArea(str, Enum):
    """Career interest areas (single select)."""

    INFORMATION_TECHNOLOGY = "Information Technology"
    HEALTHCARE = "Healthcare & Medicine"
    EDUCATION = "Education & Training"
    BUSINESS = "Business & Entrepreneurship"
    GOVERNMENT = "Government & Public Service"
    BANKING_FINANCE = "Banking & Finance"
    MEDIA = "Media & Entertainment"
    AGRICULTURE = "Agriculture & Food"
    MANUFACTURING = "Manufacturing & Engineering"
    SOCIAL_WORK = "Social Work & NGO"
    TOURISM = "Tourism & Hospitality"
    RETAIL = "Retail & E-commerce"


class Timeline(str, Enum):
    """When the user plans to start working."""

    IMMEDIATE = "immediate"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def label(self) -> str:
        return _TIMELINE_LABELS[self]


_TIMELINE_LABELS = {
    Timeline.IMMEDIATE: "Immediate (0-2 months)",
    Timeline.SHORT: "Short term (2-6 months)",
    Timeline.MEDIUM: "Medium term (6-12 months)",
    Timeline.LONG: "Long term (1+ years)",
}


class Location(str, Enum):
    """Preferred work location."""

    BANGALORE = "bangalore"
    MUMBAI = "mumbai"
    DELHI = "delhi"
    HYDERABAD = "hyderabad"
    PUNE = "pune"
    CHENNAI = "chennai"
    KOLKATA = "kolkata"
    AHMEDABAD = "ahmedabad"
    REMOTE = "remote"
    ANYWHERE = "anywhere"

    @property
    def label(self) -> str:
        return _LOCATION_LABELS.get(self, self.value.title())


_LOCATION_LABELS = {
    Location.DELHI: "Delhi NCR",
    Location.REMOTE: "Remote/Work from Home",
    Location.ANYWHERE: "Open to relocate",
}
