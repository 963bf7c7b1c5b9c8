"""Historical KUCCPS cutoff ranges (2022-2024 placement trends)

Each row lists the four cluster subjects a programme scores and three
thresholds: highly competitive, moderate chance and stretch.
"""

from typing import Tuple

from access_careers.schemas.education import CourseCutoff, ProgrammeLevel

DEGREE = ProgrammeLevel.DEGREE
DIPLOMA = ProgrammeLevel.DIPLOMA

def _cutoff(
    course_id: str,
    course_name: str,
    level: ProgrammeLevel,
    category: str,
    cluster: Tuple[str, ...],
    high: int,
    mid: int,
    low: int,
) -> CourseCutoff:
    return CourseCutoff(
        course_id=course_id,
        course_name=course_name,
        programme_level=level,
        category=category,
        cluster_subject_ids=cluster,
        cutoff_high=high,
        cutoff_mid=mid,
        cutoff_low=low,
    )

COURSE_CUTOFFS = (
    # DEGREE: Medical & Health Sciences
    _cutoff("d-mhs-001", "Bachelor of Medicine and Bachelor of Surgery (MBChB)", DEGREE, "Medical & Health Sciences", ("biology", "chemistry", "maths", "physics"), 47, 44, 42),
    _cutoff("d-mhs-002", "Bachelor of Pharmacy (BPharm)", DEGREE, "Medical & Health Sciences", ("chemistry", "biology", "maths", "physics"), 45, 42, 40),
    _cutoff("d-mhs-003", "Bachelor of Science in Nursing", DEGREE, "Medical & Health Sciences", ("biology", "chemistry", "maths", "english"), 42, 38, 36),
    _cutoff("d-mhs-004", "Bachelor of Dental Surgery (BDS)", DEGREE, "Medical & Health Sciences", ("biology", "chemistry", "physics", "maths"), 46, 43, 41),
    _cutoff("d-mhs-005", "Bachelor of Science in Clinical Medicine", DEGREE, "Medical & Health Sciences", ("biology", "chemistry", "maths", "physics"), 41, 38, 35),

    # DEGREE: Engineering & Technology
    _cutoff("d-et-001", "Bachelor of Science in Civil Engineering", DEGREE, "Engineering & Technology", ("maths", "physics", "chemistry", "english"), 44, 40, 37),
    _cutoff("d-et-002", "Bachelor of Science in Electrical and Electronic Engineering", DEGREE, "Engineering & Technology", ("maths", "physics", "chemistry", "english"), 44, 40, 37),
    _cutoff("d-et-003", "Bachelor of Science in Mechanical Engineering", DEGREE, "Engineering & Technology", ("maths", "physics", "chemistry", "english"), 43, 39, 36),
    _cutoff("d-et-004", "Bachelor of Science in Chemical Engineering", DEGREE, "Engineering & Technology", ("maths", "chemistry", "physics", "english"), 42, 38, 35),
    _cutoff("d-et-005", "Bachelor of Technology in Mechatronic Engineering", DEGREE, "Engineering & Technology", ("maths", "physics", "chemistry", "english"), 41, 37, 34),

    # DEGREE: Computing & ICT
    _cutoff("d-ict-001", "Bachelor of Science in Computer Science", DEGREE, "Computing & ICT", ("maths", "physics", "english", "chemistry"), 42, 38, 35),
    _cutoff("d-ict-002", "Bachelor of Science in Information Technology", DEGREE, "Computing & ICT", ("maths", "english", "physics", "chemistry"), 38, 34, 31),
    _cutoff("d-ict-003", "Bachelor of Business Information Technology (BBIT)", DEGREE, "Computing & ICT", ("maths", "english", "business", "physics"), 37, 33, 30),
    _cutoff("d-ict-004", "Bachelor of Science in Software Engineering", DEGREE, "Computing & ICT", ("maths", "physics", "english", "chemistry"), 41, 37, 34),
    _cutoff("d-ict-005", "Bachelor of Science in Cybersecurity and Digital Forensics", DEGREE, "Computing & ICT", ("maths", "physics", "english", "chemistry"), 40, 36, 33),

    # DEGREE: Business & Economics
    _cutoff("d-be-001", "Bachelor of Commerce (BCom)", DEGREE, "Business & Economics", ("maths", "english", "business", "kiswahili"), 38, 34, 31),
    _cutoff("d-be-002", "Bachelor of Science in Economics", DEGREE, "Business & Economics", ("maths", "english", "geography", "business"), 37, 33, 30),
    _cutoff("d-be-003", "Bachelor of Science in Actuarial Science", DEGREE, "Business & Economics", ("maths", "english", "physics", "chemistry"), 45, 42, 39),
    _cutoff("d-be-004", "Bachelor of Science in Finance", DEGREE, "Business & Economics", ("maths", "english", "business", "kiswahili"), 37, 33, 30),

    # DEGREE: Education & Teaching
    _cutoff("d-edu-001", "Bachelor of Education (Arts)", DEGREE, "Education & Teaching", ("english", "kiswahili", "history", "geography"), 36, 32, 29),
    _cutoff("d-edu-002", "Bachelor of Education (Science)", DEGREE, "Education & Teaching", ("maths", "physics", "chemistry", "biology"), 37, 33, 30),

    # DEGREE: Law & Governance
    _cutoff("d-lg-001", "Bachelor of Laws (LLB)", DEGREE, "Law & Governance", ("english", "kiswahili", "history", "cre"), 44, 41, 38),

    # DEGREE: Agriculture & Environmental Sciences
    _cutoff("d-ae-001", "Bachelor of Science in Agriculture", DEGREE, "Agriculture & Environmental Sciences", ("biology", "chemistry", "maths", "agriculture"), 36, 32, 28),
    _cutoff("d-ae-002", "Bachelor of Science in Environmental Science", DEGREE, "Agriculture & Environmental Sciences", ("biology", "chemistry", "geography", "maths"), 35, 31, 28),

    # DEGREE: Natural & Physical Sciences
    _cutoff("d-ns-001", "Bachelor of Science in Mathematics", DEGREE, "Natural & Physical Sciences", ("maths", "physics", "chemistry", "english"), 39, 35, 32),
    _cutoff("d-ns-002", "Bachelor of Science in Physics", DEGREE, "Natural & Physical Sciences", ("physics", "maths", "chemistry", "english"), 38, 34, 31),
    _cutoff("d-ns-003", "Bachelor of Science in Chemistry", DEGREE, "Natural & Physical Sciences", ("chemistry", "maths", "physics", "biology"), 37, 33, 30),

    # DEGREE: Social Sciences & Humanities
    _cutoff("d-ss-001", "Bachelor of Arts in Communication and Media Studies", DEGREE, "Social Sciences & Humanities", ("english", "kiswahili", "history", "geography"), 36, 32, 29),
    _cutoff("d-ss-002", "Bachelor of Psychology", DEGREE, "Social Sciences & Humanities", ("english", "biology", "kiswahili", "history"), 37, 33, 30),

    # DEGREE: Creative Arts, Media & Design
    _cutoff("d-cam-001", "Bachelor of Architecture", DEGREE, "Creative Arts, Media & Design", ("maths", "physics", "english", "chemistry"), 42, 38, 35),
    _cutoff("d-cam-002", "Bachelor of Fine Arts", DEGREE, "Creative Arts, Media & Design", ("english", "kiswahili", "history", "geography"), 33, 29, 26),

    # DIPLOMA: Health Sciences
    _cutoff("dip-hs-001", "Diploma in Clinical Medicine and Surgery", DIPLOMA, "Health Sciences", ("biology", "chemistry", "maths", "english"), 34, 30, 26),
    _cutoff("dip-hs-002", "Diploma in Kenya Registered Community Health Nursing (KRCHN)", DIPLOMA, "Health Sciences", ("biology", "chemistry", "english", "maths"), 32, 28, 24),
    _cutoff("dip-hs-003", "Diploma in Pharmacy", DIPLOMA, "Health Sciences", ("chemistry", "biology", "maths", "english"), 33, 29, 25),
    _cutoff("dip-hs-004", "Diploma in Medical Laboratory Sciences", DIPLOMA, "Health Sciences", ("biology", "chemistry", "maths", "physics"), 32, 28, 24),

    # DIPLOMA: Technical & Engineering
    _cutoff("dip-te-001", "Diploma in Electrical and Electronic Engineering", DIPLOMA, "Technical & Engineering", ("maths", "physics", "english", "chemistry"), 30, 26, 22),
    _cutoff("dip-te-002", "Diploma in Mechanical Engineering", DIPLOMA, "Technical & Engineering", ("maths", "physics", "chemistry", "english"), 30, 26, 22),
    _cutoff("dip-te-003", "Diploma in Civil Engineering", DIPLOMA, "Technical & Engineering", ("maths", "physics", "chemistry", "english"), 30, 26, 22),

    # DIPLOMA: ICT & Computing
    _cutoff("dip-ict-001", "Diploma in Information Communication Technology", DIPLOMA, "ICT & Computing", ("maths", "english", "physics", "business"), 28, 24, 20),

    # DIPLOMA: Business & Finance
    _cutoff("dip-bf-001", "Diploma in Business Management", DIPLOMA, "Business & Finance", ("maths", "english", "business", "kiswahili"), 28, 24, 20),
    _cutoff("dip-bf-002", "Diploma in Accounting", DIPLOMA, "Business & Finance", ("maths", "english", "business", "kiswahili"), 28, 24, 20),

    # DIPLOMA: Education & Teacher Training
    _cutoff("dip-ed-001", "Diploma in Primary Teacher Education (PTE)", DIPLOMA, "Education & Teacher Training", ("english", "kiswahili", "maths", "cre"), 26, 22, 18),

    # DIPLOMA: Hospitality & Tourism
    _cutoff("dip-ht-001", "Diploma in Hospitality Management", DIPLOMA, "Hospitality & Tourism", ("english", "kiswahili", "business", "geography"), 26, 22, 18),
    _cutoff("dip-ht-002", "Diploma in Food and Beverage Management", DIPLOMA, "Hospitality & Tourism", ("english", "biology", "chemistry", "business"), 26, 22, 18),
)
