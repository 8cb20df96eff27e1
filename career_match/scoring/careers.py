"""Built-in career catalog.

Salary ranges must stay in the "$NNN,NNN - $NNN,NNN" form; salary sorting
averages every "$NNN,NNN" amount it finds in the text.
"""

DEFAULT_CAREERS: list[dict] = [
    {
        "title": "Data Scientist",
        "description": (
            "Apply statistical analysis, machine learning, and data visualization "
            "techniques to extract insights from large datasets. Develop models to "
            "predict trends and support business decision-making."
        ),
        "required_skills": [
            {"name": "Python", "importance": 0.9},
            {"name": "Machine Learning", "importance": 0.9},
            {"name": "SQL", "importance": 0.8},
            {"name": "Statistics", "importance": 0.8},
            {"name": "Data Visualization", "importance": 0.7},
        ],
        "required_education": [
            "Computer Science",
            "Statistics",
            "Mathematics",
            "Data Science",
        ],
        "related_interests": ["Technology", "Mathematics", "Research", "Analytics"],
        "average_salary": "$105,000 - $150,000",
        "demand_level": "High",
        "industry": "Technology",
    },
    {
        "title": "Software Engineer",
        "description": (
            "Design, develop, and maintain software applications and systems. Write "
            "clean, efficient code and collaborate with cross-functional teams to "
            "implement new features and improve existing ones."
        ),
        "required_skills": [
            {"name": "JavaScript", "importance": 0.9},
            {"name": "Python", "importance": 0.7},
            {"name": "Java", "importance": 0.7},
            {"name": "SQL", "importance": 0.6},
            {"name": "Problem Solving", "importance": 0.9},
        ],
        "required_education": [
            "Computer Science",
            "Software Engineering",
            "Information Technology",
        ],
        "related_interests": ["Technology", "Software Development", "Innovation"],
        "average_salary": "$90,000 - $140,000",
        "demand_level": "High",
        "industry": "Technology",
    },
    {
        "title": "UX/UI Designer",
        "description": (
            "Create intuitive and engaging user experiences for digital products. "
            "Conduct user research, develop wireframes and prototypes, and "
            "collaborate with developers to implement designs."
        ),
        "required_skills": [
            {"name": "UI/UX Design", "importance": 0.9},
            {"name": "Figma", "importance": 0.8},
            {"name": "User Research", "importance": 0.7},
            {"name": "Wireframing", "importance": 0.8},
            {"name": "HTML/CSS", "importance": 0.6},
        ],
        "required_education": ["Design", "Human-Computer Interaction", "Psychology"],
        "related_interests": ["Design", "Psychology", "Technology", "Creativity"],
        "average_salary": "$80,000 - $120,000",
        "demand_level": "High",
        "industry": "Technology",
    },
    {
        "title": "Product Manager",
        "description": (
            "Lead product development from conception to launch. Define product "
            "vision, gather requirements, prioritize features, and coordinate with "
            "engineering, design, and marketing teams."
        ),
        "required_skills": [
            {"name": "Product Management", "importance": 0.9},
            {"name": "Communication", "importance": 0.9},
            {"name": "Strategy", "importance": 0.8},
            {"name": "Data Analysis", "importance": 0.7},
            {"name": "Leadership", "importance": 0.8},
        ],
        "required_education": ["Business", "Computer Science", "Engineering"],
        "related_interests": ["Business", "Technology", "Leadership", "Innovation"],
        "average_salary": "$100,000 - $150,000",
        "demand_level": "High",
        "industry": "Technology",
    },
    {
        "title": "Digital Marketing Specialist",
        "description": (
            "Create and implement marketing strategies across digital channels to "
            "increase brand awareness and drive customer acquisition. Analyze "
            "campaign performance and optimize for better results."
        ),
        "required_skills": [
            {"name": "Digital Marketing", "importance": 0.9},
            {"name": "SEO", "importance": 0.8},
            {"name": "Social Media", "importance": 0.8},
            {"name": "Content Creation", "importance": 0.7},
            {"name": "Analytics", "importance": 0.7},
        ],
        "required_education": ["Marketing", "Communications", "Business"],
        "related_interests": ["Marketing", "Media", "Creative Writing", "Analytics"],
        "average_salary": "$60,000 - $95,000",
        "demand_level": "High",
        "industry": "Marketing",
    },
    {
        "title": "Financial Analyst",
        "description": (
            "Analyze financial data to support business decisions. Prepare "
            "financial reports, forecasts, and budgets. Identify trends, risks, and "
            "opportunities to improve financial performance."
        ),
        "required_skills": [
            {"name": "Financial Analysis", "importance": 0.9},
            {"name": "Excel", "importance": 0.8},
            {"name": "Data Analysis", "importance": 0.8},
            {"name": "Accounting", "importance": 0.7},
            {"name": "Financial Modeling", "importance": 0.7},
        ],
        "required_education": ["Finance", "Accounting", "Economics", "Business"],
        "related_interests": ["Finance", "Economics", "Business", "Mathematics"],
        "average_salary": "$75,000 - $110,000",
        "demand_level": "Medium",
        "industry": "Finance",
    },
    {
        "title": "Healthcare Administrator",
        "description": (
            "Manage healthcare facilities, services, and staff. Ensure compliance "
            "with healthcare laws and regulations. Develop and implement policies "
            "to improve quality of care and operational efficiency."
        ),
        "required_skills": [
            {"name": "Healthcare Management", "importance": 0.9},
            {"name": "Leadership", "importance": 0.8},
            {"name": "Communication", "importance": 0.8},
            {"name": "Regulatory Compliance", "importance": 0.7},
            {"name": "Budgeting", "importance": 0.7},
        ],
        "required_education": [
            "Healthcare Administration",
            "Public Health",
            "Business",
        ],
        "related_interests": ["Healthcare", "Management", "Policy", "Public Service"],
        "average_salary": "$80,000 - $120,000",
        "demand_level": "High",
        "industry": "Healthcare",
    },
    {
        "title": "Environmental Scientist",
        "description": (
            "Study environmental problems and develop solutions. Collect and "
            "analyze data to monitor environmental impacts. Prepare reports and "
            "make recommendations to minimize negative effects on the environment."
        ),
        "required_skills": [
            {"name": "Environmental Science", "importance": 0.9},
            {"name": "Data Analysis", "importance": 0.8},
            {"name": "Research", "importance": 0.8},
            {"name": "Report Writing", "importance": 0.7},
            {"name": "Field Sampling", "importance": 0.7},
        ],
        "required_education": [
            "Environmental Science",
            "Biology",
            "Chemistry",
            "Geology",
        ],
        "related_interests": ["Environment", "Science", "Research", "Sustainability"],
        "average_salary": "$65,000 - $95,000",
        "demand_level": "Medium",
        "industry": "Environmental Services",
    },
    {
        "title": "Cybersecurity Analyst",
        "description": (
            "Protect computer systems and networks from cyber threats. Monitor "
            "security access, install security measures, and perform vulnerability "
            "testing. Investigate security breaches and develop security strategies."
        ),
        "required_skills": [
            {"name": "Cybersecurity", "importance": 0.9},
            {"name": "Network Security", "importance": 0.8},
            {"name": "Threat Analysis", "importance": 0.8},
            {"name": "Security Tools", "importance": 0.7},
            {"name": "Incident Response", "importance": 0.7},
        ],
        "required_education": ["Computer Science", "Information Security", "IT"],
        "related_interests": ["Technology", "Security", "Problem Solving"],
        "average_salary": "$90,000 - $130,000",
        "demand_level": "High",
        "industry": "Technology",
    },
    {
        "title": "Human Resources Manager",
        "description": (
            "Oversee the recruitment, hiring, and development of employees. "
            "Administer compensation and benefits programs. Handle workplace issues "
            "and ensure compliance with labor laws."
        ),
        "required_skills": [
            {"name": "Human Resources", "importance": 0.9},
            {"name": "Recruitment", "importance": 0.8},
            {"name": "Communication", "importance": 0.9},
            {"name": "Conflict Resolution", "importance": 0.7},
            {"name": "Employee Relations", "importance": 0.8},
        ],
        "required_education": ["Human Resources", "Business", "Psychology"],
        "related_interests": [
            "Human Resources",
            "Management",
            "Psychology",
            "Business",
        ],
        "average_salary": "$70,000 - $115,000",
        "demand_level": "Medium",
        "industry": "Human Resources",
    },
]
