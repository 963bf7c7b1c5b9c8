"""Programme levels and the browse categories under each"""

from access_careers.schemas.education import ProgrammeCategories, ProgrammeLevel

PROGRAMME_LEVELS = tuple(ProgrammeLevel)

PROGRAMME_CATEGORIES = (
    ProgrammeCategories(
        level=ProgrammeLevel.DEGREE,
        categories=(
            "Medical & Health Sciences",
            "Engineering & Technology",
            "Computing & ICT",
            "Business & Economics",
            "Education & Teaching",
            "Law & Governance",
            "Agriculture & Environmental Sciences",
            "Natural & Physical Sciences",
            "Social Sciences & Humanities",
            "Creative Arts, Media & Design",
        ),
    ),
    ProgrammeCategories(
        level=ProgrammeLevel.DIPLOMA,
        categories=(
            "Health Sciences",
            "Technical & Engineering",
            "ICT & Computing",
            "Business & Finance",
            "Education & Teacher Training",
            "Hospitality & Tourism",
            "Agriculture & Animal Sciences",
            "Construction & Building",
            "Media & Creative Studies",
        ),
    ),
    ProgrammeCategories(
        level=ProgrammeLevel.CERTIFICATE,
        categories=(
            "Business & Entrepreneurship",
            "ICT & Computer Skills",
            "Hospitality & Tourism",
            "Technical Trades",
            "Health Support Services",
            "Agriculture Skills",
        ),
    ),
    ProgrammeCategories(
        level=ProgrammeLevel.ARTISAN,
        categories=(
            "Electrical & Electronics",
            "Mechanical & Automotive",
            "Construction Trades",
            "Metal & Fabrication",
            "Plumbing & Water Technology",
            "Beauty & Fashion Trades",
        ),
    ),
)
