"""
Built-in dataset used when the public search endpoint is unreachable.

Kept small and fixed: three faculty members with the papers, patents and
projects they lead. fallback_dataset() validates a fresh copy on every call
so callers may mutate what they get back.
"""

from discovery.models import Dataset

FALLBACK_DATA = {
    "faculty": [
        {
            "id": "1",
            "name": "Dr. Sarah Johnson",
            "title": "Professor",
            "department": "Computer Science",
            "email": "sjohnson@salisbury.edu",
            "phone": "(410) 543-6000",
            "photo": "",
            "bio": "Dr. Sarah Johnson brings extensive expertise in artificial intelligence "
                   "and machine learning, with recent work on secure data pipelines.",
            "researchInterests": ["Artificial Intelligence", "Machine Learning",
                                  "Natural Language Processing", "Cybersecurity"],
            "aiKeywords": ["machine learning", "artificial intelligence", "nlp",
                           "cybersecurity", "data analytics"],
        },
        {
            "id": "2",
            "name": "Dr. Michael Chen",
            "title": "Associate Professor",
            "department": "Business Administration",
            "email": "mchen@salisbury.edu",
            "phone": "(410) 543-6100",
            "photo": "",
            "bio": "Dr. Michael Chen specializes in strategic management and entrepreneurship, "
                   "with a focus on innovation in small businesses.",
            "researchInterests": ["Strategic Management", "Entrepreneurship",
                                  "Innovation", "Business Analytics"],
            "aiKeywords": ["strategy", "entrepreneurship", "innovation", "business analytics"],
        },
        {
            "id": "3",
            "name": "Dr. Emily Rodriguez",
            "title": "Assistant Professor",
            "department": "Biology",
            "email": "erodriguez@salisbury.edu",
            "phone": "(410) 543-6200",
            "photo": "",
            "bio": "Dr. Emily Rodriguez focuses on marine biology and environmental science, "
                   "studying coastal ecosystems.",
            "researchInterests": ["Marine Biology", "Ecology",
                                  "Environmental Science", "Conservation"],
            "aiKeywords": ["marine biology", "ecology", "conservation", "coastal ecosystems"],
        },
    ],
    "papers": [
        {
            "id": "p1",
            "title": "Deep Learning Approaches to Natural Language Understanding",
            "authors": ["Sarah Johnson", "John Smith"],
            "year": 2023,
            "abstract": "This paper explores novel deep learning architectures for improving "
                        "natural language understanding tasks.",
            "link": "https://doi.org/10.1613/jair.1.12345",
            "aiKeywords": ["deep learning", "nlp", "natural language understanding"],
        },
        {
            "id": "p2",
            "title": "Entrepreneurial Innovation in Digital Transformation",
            "authors": ["Michael Chen", "Lisa Wong"],
            "year": 2022,
            "abstract": "An examination of how entrepreneurial firms navigate digital "
                        "transformation challenges.",
            "link": "https://doi.org/10.1002/smj.3456",
            "aiKeywords": ["entrepreneurship", "innovation", "digital transformation"],
        },
        {
            "id": "p3",
            "title": "Climate Change Impacts on Chesapeake Bay Marine Ecosystems",
            "authors": ["Emily Rodriguez", "David Martinez"],
            "year": 2024,
            "abstract": "A comprehensive study of climate change effects on Chesapeake Bay biodiversity.",
            "link": "https://doi.org/10.3354/meps14123",
            "aiKeywords": ["climate change", "marine ecosystems", "biodiversity"],
        },
    ],
    "patents": [
        {
            "id": "t1",
            "title": "Machine Learning System for Predictive Analytics",
            "inventors": ["Sarah Johnson", "Robert Lee"],
            "patentNumber": "US10234567B2",
            "year": 2023,
            "description": "A novel system for predictive analytics using advanced machine "
                           "learning algorithms.",
            "link": "https://patents.google.com/patent/US10234567B2",
            "aiKeywords": ["machine learning", "predictive analytics", "data analytics"],
        },
        {
            "id": "t2",
            "title": "Sustainable Business Process Optimization Framework",
            "inventors": ["Michael Chen"],
            "patentNumber": "US10345678B2",
            "year": 2022,
            "description": "A framework for optimizing business processes with sustainability "
                           "considerations.",
            "link": "https://patents.google.com/patent/US10345678B2",
            "aiKeywords": ["process optimization", "sustainability", "business analytics"],
        },
    ],
    "projects": [
        {
            "id": "r1",
            "title": "AI-Enhanced Educational Platform Development",
            "leadFaculty": ["Sarah Johnson", "Robert Lee", "Amanda White"],
            "status": "Active",
            "description": "Developing an AI-powered platform to personalize student learning experiences.",
            "startDate": "2023-09-01",
            "aiKeywords": ["artificial intelligence", "education", "personalized learning"],
        },
        {
            "id": "r2",
            "title": "Regional Small Business Innovation Study",
            "leadFaculty": ["Michael Chen", "Lisa Wong"],
            "status": "Active",
            "description": "Analyzing innovation patterns in regional small businesses and startups.",
            "startDate": "2023-01-15",
            "endDate": "2024-12-31",
            "aiKeywords": ["innovation", "small business", "entrepreneurship"],
        },
        {
            "id": "r3",
            "title": "Chesapeake Bay Ecosystem Monitoring",
            "leadFaculty": ["Emily Rodriguez", "David Martinez", "James Wilson"],
            "status": "Active",
            "description": "Long-term monitoring project studying climate change impacts on marine life.",
            "startDate": "2022-06-01",
            "aiKeywords": ["ecology", "climate change", "marine biology", "conservation"],
        },
    ],
}


def fallback_dataset() -> Dataset:
    return Dataset.model_validate(FALLBACK_DATA)
