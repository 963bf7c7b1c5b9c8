"""KCSE subjects offered in the grade entry form"""

from access_careers.schemas.education import Subject, SubjectGroup

SUBJECTS = (
    # Compulsory
    Subject(id="maths", name="Mathematics", group=SubjectGroup.COMPULSORY),
    Subject(id="english", name="English", group=SubjectGroup.COMPULSORY),
    Subject(id="kiswahili", name="Kiswahili", group=SubjectGroup.COMPULSORY),
    # Sciences
    Subject(id="physics", name="Physics", group=SubjectGroup.SCIENCES),
    Subject(id="chemistry", name="Chemistry", group=SubjectGroup.SCIENCES),
    Subject(id="biology", name="Biology", group=SubjectGroup.SCIENCES),
    # Humanities
    Subject(id="geography", name="Geography", group=SubjectGroup.HUMANITIES),
    Subject(id="history", name="History", group=SubjectGroup.HUMANITIES),
    Subject(id="cre", name="CRE / IRE", group=SubjectGroup.HUMANITIES),
    # Technical
    Subject(id="computer", name="Computer Studies", group=SubjectGroup.TECHNICAL),
    Subject(id="business", name="Business Studies", group=SubjectGroup.TECHNICAL),
    Subject(id="agriculture", name="Agriculture", group=SubjectGroup.TECHNICAL),
    Subject(id="homescience", name="Home Science", group=SubjectGroup.TECHNICAL),
)
