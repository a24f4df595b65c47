from __future__ import annotations

SECTION_NAMES: tuple[str, ...] = (
    "professional summary",
    "summary",
    "objective",
    "profile",
    "experience",
    "work experience",
    "employment history",
    "work history",
    "skills",
    "technical skills",
    "core competencies",
    "qualifications",
    "education",
    "academic background",
    "training",
    "projects",
    "portfolio",
    "achievements",
    "certifications",
    "licenses",
    "publications",
    "volunteering",
    "community service",
    "activities",
    "languages",
    "interests",
    "references",
)

ACTION_VERBS: tuple[str, ...] = (
    "led",
    "developed",
    "managed",
    "created",
    "implemented",
    "designed",
    "achieved",
    "improved",
    "increased",
    "decreased",
    "reduced",
    "saved",
    "delivered",
    "launched",
    "built",
    "optimized",
    "transformed",
)

QUANTIFIABLE_UNITS: tuple[str, ...] = ("years", "months", "users", "customers", "projects")

TECHNICAL_SKILLS: tuple[str, ...] = (
    "javascript", "typescript", "react", "angular", "vue", "node", "express",
    "python", "django", "flask", "java", "spring", "c#", ".net", "php", "laravel",
    "html", "css", "sass", "less", "tailwind", "bootstrap", "material ui", "jquery",
    "sql", "postgresql", "mysql", "mongodb", "firebase", "dynamodb", "redis",
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins",
    "git", "rest", "graphql", "redux", "webpack", "babel", "jest", "cypress", "selenium",
)

SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "collaboration", "problem-solving",
    "critical thinking", "adaptability", "time management", "organization",
    "creativity", "attention to detail", "mentoring", "decision-making",
    "conflict resolution", "negotiation", "presentation", "project management",
)

DOMAIN_SKILLS: tuple[str, ...] = (
    "healthcare", "finance", "banking", "insurance", "e-commerce", "retail",
    "manufacturing", "logistics", "education", "government", "media",
    "entertainment", "telecommunications", "automotive", "aerospace", "marketing",
    "sales", "human resources", "legal", "consulting", "research", "data science",
    "machine learning", "ai", "blockchain", "iot", "mobile", "security", "devops",
)

SUGGESTION_POOL: tuple[str, ...] = (
    'Quantify your achievements with metrics (e.g., "Increased sales by 25%" instead of "Increased sales")',
    "Tailor your resume for each job application by emphasizing relevant skills and experience",
    "Add a LinkedIn profile and ensure it is consistent with your resume",
    "Consider adding a brief projects section if you have relevant work to showcase",
    'Use strong action verbs at the beginning of each bullet point (e.g., "Implemented", "Developed", "Led")',
    "Create a more focused professional summary that highlights your unique value proposition",
    "Remove outdated or irrelevant experience to keep your resume concise",
    "Incorporate industry keywords to help your resume pass through ATS systems",
    "Add specific technical skills with proficiency levels where applicable",
    "Include certifications and continuing education to demonstrate ongoing professional development",
    "Make your achievements more specific by including context, action, and results",
    "Ensure consistent formatting throughout your resume (fonts, bullet points, spacing)",
    "Consider a skills-based format if you're changing industries or have employment gaps",
    "Add a brief technologies/tools section for technical roles",
    "Use white space strategically to improve readability and visual appeal",
    'Replace generic phrases like "team player" with specific examples of collaboration',
    "Include relevant volunteer work, especially if it demonstrates transferable skills",
    'Eliminate pronouns like "I" and "my" to maintain a professional tone',
    "Adjust your resume length based on your experience level (1 page for early career, 2 pages for 10+ years)",
    "Have your resume reviewed by someone in your target industry for specialized feedback",
)

EMPTY_RESUME_SUGGESTIONS: tuple[str, ...] = (
    "Start by creating a clear and concise resume with your contact information at the top",
    "Include a strong professional summary that highlights your key qualifications",
    "Organize your experience section chronologically with most recent positions first",
    "Include a skills section that highlights both technical and soft skills",
    "Add your education and any relevant certifications or training",
)

JOB_MATCH_KEYWORDS: tuple[str, ...] = (
    # technology
    "React", "TypeScript", "JavaScript", "Node.js", "API", "Python", "Java", "C#",
    "Ruby", "Git", "Agile", "Scrum", "Testing", "Frontend", "Backend", "Full Stack",
    "CI/CD", "AWS", "Azure", "Cloud", "Docker", "Kubernetes", "Database", "SQL", "NoSQL",
    # business
    "Strategy", "Analytics", "Management", "Leadership", "Sales", "Marketing", "SEO",
    "Social Media", "Content", "Campaign", "Budget", "ROI", "KPI", "CRM",
    # design
    "UX", "UI", "User Experience", "User Interface", "Figma", "Sketch", "Adobe",
    "Photoshop", "Illustrator", "Wireframes", "Prototyping", "Responsive Design",
    # general
    "Communication", "Teamwork", "Project Management", "Problem Solving",
    "Critical Thinking", "Customer Service", "Time Management", "Stakeholder",
    "Presentation", "Negotiation",
)

JOB_MATCH_SUGGESTIONS: tuple[str, ...] = (
    "Quantify your achievements with specific metrics and outcomes",
    "Highlight leadership roles or team collaboration examples",
    "Include specific examples of relevant projects you've completed",
    "Tailor your professional summary to better match the job requirements",
    "Reorganize your skills section to prioritize the most relevant technologies",
    "Add more industry-specific terminology throughout your resume",
    "Emphasize problem-solving abilities with concrete examples",
    "Include relevant certifications or continued education in your field",
    "Demonstrate your communication skills with specific examples",
    "Show progression and growth in your career history",
)

ATS_KEYWORDS: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "projects",
    "contact",
    "email",
    "phone",
    "address",
    "summary",
    "objective",
    "awards",
    "certifications",
)

ATS_GENERIC_TIPS: tuple[str, ...] = (
    "Use a clean, simple format with standard section headers.",
    "Ensure your name and contact details are at the top of the resume.",
    "Avoid images, graphics, and text boxes as ATS cannot read these.",
    "Use standard fonts like Arial, Calibri, or Times New Roman.",
)

ROLE_WORDS: tuple[str, ...] = (
    "senior", "lead", "principal", "staff", "director", "manager",
    "engineer", "developer", "analyst", "specialist", "consultant", "architect",
)

KNOWN_ROLE_TITLES: tuple[str, ...] = (
    "Software Engineer",
    "Front-end Developer",
    "Back-end Developer",
    "Full Stack Developer",
    "DevOps Engineer",
    "Data Scientist",
    "Product Manager",
    "Project Manager",
    "UI/UX Designer",
)
