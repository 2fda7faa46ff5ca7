"""
Keyword sets shared by the field and section extractors.

All entries are lowercase; callers lowercase their input before lookup.
"""

# ===== SECTION KEYWORDS (substring match against a lowercased line) =====

SUMMARY_KEYWORDS = ("summary", "objective", "profile", "about", "overview")

EXPERIENCE_KEYWORDS = ("experience", "employment", "work history", "professional experience")

EDUCATION_KEYWORDS = ("education", "academic", "university", "college", "degree")

SKILLS_KEYWORDS = ("skills", "technical skills", "competencies", "proficiencies")

# Common resume section headers (never a name, never a skill)
HEADER_BLACKLIST = {
    "objective",
    "summary",
    "professional summary",
    "profile",
    "about",
    "about me",
    "overview",
    "experience",
    "work experience",
    "employment",
    "employment history",
    "work history",
    "professional experience",
    "education",
    "academic background",
    "skills",
    "technical skills",
    "soft skills",
    "core competencies",
    "competencies",
    "proficiencies",
    "projects",
    "personal projects",
    "certifications",
    "certificates",
    "licenses",
    "awards",
    "achievements",
    "publications",
    "volunteer",
    "volunteering",
    "volunteer experience",
    "interests",
    "hobbies",
    "languages",
    "references",
    "contact",
    "additional information",
    "resume",
    "curriculum vitae",
}

# ===== ROLE KEYWORDS =====

ROLE_KEYWORDS = (
    "developer",
    "engineer",
    "manager",
    "designer",
    "analyst",
    "consultant",
    "architect",
    "scientist",
    "specialist",
    "administrator",
    "programmer",
    "lead",
    "director",
    "intern",
    "coordinator",
    "officer",
    "technician",
    "strategist",
    "researcher",
    "accountant",
    "associate",
    "executive",
    "representative",
    "head",
    "founder",
    "co-founder",
    "cto",
    "ceo",
    "vp",
    "president",
    "owner",
    "freelancer",
    "contractor",
    "tester",
    "writer",
    "editor",
    "teacher",
    "instructor",
    "nurse",
    "assistant",
    "supervisor",
)

# ===== TECHNOLOGY NAMES =====
# Used to reject "React, Vue"-style location false positives and to accept multi-word skills.

TECH_NAMES = {
    "react", "vue", "angular", "svelte", "node", "nodejs", "next", "nuxt", "express",
    "python", "java", "javascript", "typescript", "ruby", "rails", "php", "laravel",
    "go", "golang", "rust", "swift", "kotlin", "scala", "perl", "dart", "flutter",
    "django", "flask", "fastapi", "spring", "redux", "jquery", "bootstrap", "tailwind",
    "html", "css", "sass", "less", "graphql", "rest", "api", "apis", "json", "xml",
    "docker", "kubernetes", "terraform", "ansible", "jenkins", "git", "github", "gitlab",
    "aws", "azure", "gcp", "firebase", "heroku", "vercel", "netlify", "linux", "unix",
    "sql", "mysql", "postgresql", "postgres", "sqlite", "mongodb", "redis", "oracle",
    "kafka", "spark", "hadoop", "airflow", "tableau", "excel", "powerbi",
    "pandas", "numpy", "tensorflow", "pytorch", "keras", "scikit-learn", "opencv",
    "figma", "jira", "confluence", "webpack", "vite", "babel", "jest", "cypress",
    "ai", "ml", "ui", "ux", "qa", "ci", "cd", "devops", "agile", "scrum", "saas",
}

# Generic technology words that make a 3+ word phrase a plausible skill
TECH_KEYWORDS = TECH_NAMES | {
    "cloud", "web", "services", "service", "development", "learning", "machine",
    "data", "database", "databases", "testing", "design", "framework", "frameworks",
    "platform", "analytics", "analysis", "security", "engineering", "architecture",
    "microservices", "deployment", "automation", "pipelines", "pipeline", "networking",
    "programming", "software", "systems", "mobile", "frontend", "backend", "full-stack",
    "fullstack", "integration", "visualization", "modeling", "computing", "management",
    "version", "control", "processing", "language", "intelligence", "vision",
}

# ===== SKILL FILTERS =====

SKILL_STOP_WORDS = {
    "and", "or", "the", "a", "an", "with", "etc", "others", "other", "various", "including",
    "skills", "skill", "experience", "knowledge", "proficient", "familiar", "tools",
    "technologies", "languages", "frameworks", "expert", "advanced", "intermediate",
    "beginner", "basic", "good", "strong", "excellent", "more", "less", "some", "many",
    "present", "current", "n/a", "na", "none", "page", "references",
}

# Connective words that mark a line as running prose rather than a skill list
SENTENCE_CONNECTIVES = {
    "the", "and", "with", "for", "of", "to", "in", "that", "which", "who", "is", "are",
    "was", "were", "have", "has", "by", "from", "on", "as", "an", "my", "our", "their",
    "through", "while", "including", "responsible",
}

# ===== LOCATION KEYWORDS =====

US_STATES = {
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL", "IN",
    "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV",
    "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC", "SD", "TN",
    "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY", "DC",
}

# Multi-word states/countries (normalized for lookup)
MULTI_WORD_REGIONS = {
    "new york", "new mexico", "new hampshire", "new jersey", "north carolina",
    "north dakota", "south carolina", "south dakota", "west virginia", "rhode island",
    "puerto rico", "united states", "united kingdom", "united arab", "new zealand",
    "south africa", "south korea", "hong kong", "saudi arabia", "costa rica",
}

LOCATION_KEYWORDS = {
    # US states
    "alabama", "alaska", "arizona", "arkansas", "california", "colorado", "connecticut",
    "delaware", "florida", "georgia", "hawaii", "idaho", "illinois", "indiana", "iowa",
    "kansas", "kentucky", "louisiana", "maine", "maryland", "massachusetts", "michigan",
    "minnesota", "mississippi", "missouri", "montana", "nebraska", "nevada", "ohio",
    "oklahoma", "oregon", "pennsylvania", "tennessee", "texas", "utah", "vermont",
    "virginia", "washington", "wisconsin", "wyoming",
    # Countries
    "usa", "us", "uk", "uae", "canada", "mexico", "brazil", "argentina", "india",
    "pakistan", "bangladesh", "china", "japan", "korea", "singapore", "malaysia",
    "indonesia", "philippines", "vietnam", "australia", "germany", "france", "spain",
    "italy", "portugal", "netherlands", "belgium", "switzerland", "austria", "sweden",
    "norway", "denmark", "finland", "ireland", "poland", "ukraine", "romania", "greece",
    "turkey", "israel", "egypt", "nigeria", "kenya", "england", "scotland", "remote",
    # Large cities
    "london", "paris", "berlin", "toronto", "vancouver", "sydney", "melbourne", "dubai",
    "bangalore", "bengaluru", "mumbai", "delhi", "hyderabad", "pune", "chennai",
    "seattle", "portland", "austin", "boston", "chicago", "denver", "atlanta",
}
LOCATION_KEYWORDS |= MULTI_WORD_REGIONS

# Words that are never part of a city name
NON_PLACE_WORDS = {
    "inc", "llc", "ltd", "corp", "co", "company", "gmbh", "plc", "senior", "junior",
    "hybrid", "onsite", "present", "current", "phone", "email", "address",
    "location", "based", "university", "college", "school", "institute",
} | set(ROLE_KEYWORDS)
