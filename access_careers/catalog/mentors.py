"""Mentor directory

Mentors are tagged with the course categories they can advise on, so a course
page can surface the mentors for its category.
"""

from typing import List

from access_careers.schemas.education import Mentor

MENTORS = (
    # Medical & Health Sciences
    Mentor(
        id="m-001", name="Dr. Sarah Wanjiku",
        title="Consultant Physician & Medical Educator", industry="Medicine & Healthcare",
        bio="15+ years in clinical practice across leading Kenyan hospitals including KNH and Aga Khan. Passionate about mentoring the next generation of healthcare professionals.",
        guidance_areas=("Medical school preparation", "Residency guidance", "Clinical rotations", "Research opportunities", "Specialisation pathways"),
        category_tags=("Medical & Health Sciences", "Health Sciences"),
    ),
    Mentor(
        id="m-002", name="Dr. James Ochieng",
        title="Pharmacist & Pharmaceutical Researcher", industry="Pharmacy & Pharmaceutical Sciences",
        bio="Registered pharmacist with experience in hospital pharmacy and pharmaceutical manufacturing. Advisor on pharmacy career pathways in East Africa.",
        guidance_areas=("Pharmacy career paths", "Drug regulation", "Hospital vs retail pharmacy", "Pharmaceutical research"),
        category_tags=("Medical & Health Sciences", "Health Sciences"),
    ),
    # Engineering & Technology
    Mentor(
        id="m-003", name="Eng. Peter Kamau",
        title="Senior Civil Engineer", industry="Civil & Structural Engineering",
        bio="Chartered engineer with 12+ years of experience in infrastructure projects across Kenya and the wider East African region. Registered with the Engineers Board of Kenya.",
        guidance_areas=("Engineering licensure (EBK)", "Infrastructure project management", "Graduate trainee programmes", "Postgraduate studies"),
        category_tags=("Engineering & Technology", "Technical & Engineering"),
    ),
    Mentor(
        id="m-004", name="Eng. Grace Muthoni",
        title="Electrical & Renewable Energy Engineer", industry="Energy & Electrical Engineering",
        bio="Specialises in renewable energy systems and power distribution. Worked with Kenya Power and multiple green energy startups.",
        guidance_areas=("Renewable energy careers", "Power systems", "Engineering internships", "EBK registration process"),
        category_tags=("Engineering & Technology", "Technical & Engineering"),
    ),
    # Computing & ICT
    Mentor(
        id="m-005", name="Alex Njoroge",
        title="Senior Software Engineer", industry="Technology & Software Development",
        bio="Full-stack developer with experience at Safaricom, Microsoft, and several Nairobi tech startups. Active in the Kenyan tech community and open-source movement.",
        guidance_areas=("Software development career paths", "Tech internships", "Building a portfolio", "Freelancing vs employment", "Cloud computing"),
        category_tags=("Computing & ICT", "ICT & Computing"),
    ),
    Mentor(
        id="m-006", name="Faith Akinyi",
        title="Cybersecurity Analyst & Consultant", industry="Information Security",
        bio="Certified cybersecurity professional (CISSP, CEH) with experience protecting critical digital infrastructure for financial institutions in Kenya.",
        guidance_areas=("Cybersecurity career roadmap", "Industry certifications", "Ethical hacking", "Digital forensics", "Security consulting"),
        category_tags=("Computing & ICT", "ICT & Computing"),
    ),
    # Business & Economics
    Mentor(
        id="m-007", name="Catherine Mwangi",
        title="Chartered Accountant & Business Consultant", industry="Accounting & Finance",
        bio="CPA(K) holder with Big Four experience at KPMG East Africa. Now runs a boutique consultancy helping SMEs across Kenya with financial strategy.",
        guidance_areas=("CPA(K) pathway", "Accounting careers", "Financial modelling", "Audit & assurance", "Starting a consultancy"),
        category_tags=("Business & Economics", "Business & Finance"),
    ),
    Mentor(
        id="m-008", name="David Kiplagat",
        title="Actuary & Risk Analyst", industry="Insurance & Risk Management",
        bio="Fellow of the Institute and Faculty of Actuaries with experience at Jubilee Insurance and UAP Old Mutual. Mentors students through the actuarial examination journey.",
        guidance_areas=("Actuarial science exams", "Insurance industry careers", "Data analytics in finance", "Risk management"),
        category_tags=("Business & Economics", "Business & Finance"),
    ),
    # Education
    Mentor(
        id="m-009", name="Mary Njeri",
        title="Education Policy Specialist & Teacher Trainer", industry="Education",
        bio="Former high school principal with 18 years in education. Currently advises the Ministry of Education on curriculum development and teacher professional development.",
        guidance_areas=("Teaching career progression", "TSC registration", "Education administration", "Curriculum development", "Postgraduate education studies"),
        category_tags=("Education & Teaching", "Education & Teacher Training"),
    ),
    # Law
    Mentor(
        id="m-010", name="Advocate Brian Otieno",
        title="Corporate Lawyer & Legal Consultant", industry="Law & Legal Practice",
        bio="Advocate of the High Court of Kenya with 10+ years in corporate and commercial law. Previously at Anjarwalla & Khanna (ALN Kenya).",
        guidance_areas=("Kenya School of Law preparation", "Pupillage guidance", "Corporate vs litigation practice", "Legal technology", "Bar examinations"),
        category_tags=("Law & Governance",),
    ),
    # Agriculture
    Mentor(
        id="m-011", name="Dr. John Mwangi",
        title="Agricultural Scientist & Agribusiness Advisor", industry="Agriculture & Agribusiness",
        bio="Research scientist at KALRO with expertise in sustainable agriculture and agribusiness development. Helps students bridge the gap between agricultural science and commercial farming.",
        guidance_areas=("Agribusiness opportunities", "Agricultural research", "Sustainable farming", "Value chain development", "Postgraduate research"),
        category_tags=("Agriculture & Environmental Sciences",),
    ),
    # Sciences
    Mentor(
        id="m-012", name="Dr. Esther Wambui",
        title="Research Scientist & University Lecturer", industry="Pure & Applied Sciences",
        bio="PhD in Chemistry from the University of Nairobi. Lectures at a leading Kenyan university while conducting research in materials science.",
        guidance_areas=("Research career paths", "Postgraduate scholarships", "Laboratory skills", "Science communication", "Academic publishing"),
        category_tags=("Natural & Physical Sciences",),
    ),
    # Media
    Mentor(
        id="m-013", name="Diana Chebet",
        title="Media Producer & Communications Strategist", industry="Media & Communications",
        bio="Award-winning media professional with experience at NTV, BBC Africa, and multiple digital media agencies. Passionate about nurturing young journalists and content creators.",
        guidance_areas=("Journalism career paths", "Digital media production", "Public relations", "Building a media portfolio", "Freelance writing"),
        category_tags=("Social Sciences & Humanities",),
    ),
    # Architecture & Design
    Mentor(
        id="m-014", name="Arch. Samuel Kimani",
        title="Registered Architect & Urban Designer", industry="Architecture & Design",
        bio="Registered with BORAQS and has designed commercial and residential projects across Nairobi. Advocates for sustainable African architecture.",
        guidance_areas=("Architecture licensure", "Portfolio development", "Sustainable design", "Urban planning careers", "Internship guidance"),
        category_tags=("Creative Arts, Media & Design",),
    ),
    # Hospitality
    Mentor(
        id="m-015", name="Linda Achieng",
        title="Hotel General Manager & Hospitality Trainer", industry="Hospitality & Tourism",
        bio="Seasoned hospitality professional with management experience at Sarova Hotels and Radisson Blu. Certified trainer in food safety and hotel operations.",
        guidance_areas=("Hospitality management careers", "Hotel internships", "Food & beverage industry", "Tourism entrepreneurship", "International hospitality certifications"),
        category_tags=("Hospitality & Tourism",),
    ),
    # Trades
    Mentor(
        id="m-016", name="Joseph Mutua",
        title="Master Electrician & TVET Instructor", industry="Electrical Trades",
        bio="NITA-certified master electrician with 20 years of field experience. Currently teaches at a leading TVET institution and mentors young tradespeople.",
        guidance_areas=("Electrical trade licensing", "NITA certification", "Self-employment in trades", "Safety standards", "Advanced trade certifications"),
        category_tags=("Electrical & Electronics", "Building & Construction", "Automotive & Mechanics"),
    ),
    Mentor(
        id="m-017", name="Ann Wangari",
        title="Fashion Designer & Textile Entrepreneur", industry="Fashion & Textiles",
        bio="Founder of a successful Kenyan fashion brand. Trained at Kenya Polytechnic (TUM) and has showcased at Nairobi Fashion Week.",
        guidance_areas=("Fashion industry careers", "Starting a clothing business", "Textile sourcing", "Brand building", "Artisan skill development"),
        category_tags=("Beauty, Fashion & Hospitality", "Creative Arts, Media & Design"),
    ),
)

def mentors_for_category(category: str) -> List[Mentor]:
    """Mentors tagged with a course category (case-insensitive)"""
    wanted = category.strip().lower()
    return [m for m in MENTORS if any(tag.lower() == wanted for tag in m.category_tags)]
