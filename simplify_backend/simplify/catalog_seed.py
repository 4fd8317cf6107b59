"""Static catalog content loaded by ``flask --app simplify seed-catalog``."""


def _course(code, title, short_description, category, organization, level, duration):
    return dict(code=code, title=title, short_description=short_description, category=category,
                organization=organization, level=level, duration=duration, external_url="#")


COURSES = [
    _course("WEBDEV_IBM_FUNDAMENTALS", "Web Development Fundamentals",
            "Covers HTML, CSS, JavaScript, and basic frameworks for a solid foundation.",
            "webdev", "IBM SkillBuild", "Intermediate", "6-8 weeks"),
    _course("WEBDEV_FCC_RESPONSIVE", "Responsive Web Design",
            "Learn HTML, CSS, Flexbox, Grid, and Accessibility to build mobile-first websites.",
            "webdev", "freeCodeCamp", "Beginner", "300 hours"),
    _course("WEBDEV_GL_REACT", "React JS Tutorial",
            "Learn React components, JSX, props, state, hooks, and basic routing.",
            "webdev", "Great Learning", "Intermediate", "2-3 hours"),
    _course("CYBER_CS50_INTRO", "CS50's Intro to Cyber Security",
            "Covers security fundamentals, cryptography, and threat modeling.",
            "cyber", "Harvard University", "Intermediate", "10 weeks"),
    _course("CYBER_IBM_FUNDAMENTALS", "Cyber Security Fundamentals",
            "Learn about network security, cryptography, and incident response.",
            "cyber", "IBM SkillBuild", "Beginner", "6-8 hours"),
    _course("CYBER_IBM_THREAT_INTEL", "Threat Intelligence & Hunting",
            "Develop better knowledge in identifying and neutralizing threats.",
            "cyber", "IBM SkillBuild", "Intermediate", "5 hours"),
    _course("DA_HARV_PY_RESEARCH", "Using Python for Research",
            "Covers Python programming, data analysis, and visualization with real case studies.",
            "data-analytics", "Harvard University", "Intermediate", "4-8 hours"),
    _course("DA_GL_INTRO_PANDAS", "Introduction to Pandas",
            "Covers data cleaning, manipulation, filtering, and grouping using Pandas.",
            "data-analytics", "Great Learning", "Beginner", "2.25 hours"),
    _course("DA_MS_POWERBI_ANALYST", "Microsoft Power BI Data Analyst",
            "Learn to use Power BI tools, create dashboards, and integrate with Microsoft Fabric.",
            "data-analytics", "Microsoft", "Intermediate", "5 hours"),
    _course("DS_STANFORD_ML_SPEC", "Machine Learning Specialization",
            "An in-depth introduction to machine learning, data mining, and statistical pattern recognition.",
            "data-science", "Stanford University", "Intermediate", "11 weeks"),
    _course("DS_MICHIGAN_PY_EVERYBODY", "Python for Everybody",
            "Learn to program and analyze data with Python, from basics to databases.",
            "data-science", "University of Michigan", "Beginner", "5 months"),
    _course("DS_DLAI_NLP_SPEC", "NLP Specialization",
            "Enter the world of Natural Language Processing, from sentiment analysis to translation.",
            "data-science", "DeepLearning.AI", "Intermediate", "4 months"),
    _course("AIML_HARVARD_CS50_AI_PY", "CS50's Intro to AI with Python",
            "Explore the concepts and algorithms at the foundation of modern artificial intelligence.",
            "ai-ml", "Harvard University", "Intermediate", "7 weeks"),
    _course("AIML_IBM_AI_EVERYONE", "AI For Everyone",
            "A non-technical introduction to what AI can and can not do.",
            "ai-ml", "IBM SkillBuild", "Beginner", "6 hours"),
    _course("AIML_AWS_FUNDAMENTALS_ML", "Fundamentals of Machine Learning",
            "Covers the machine learning lifecycle and the AWS services that support it.",
            "ai-ml", "AWS", "Beginner", "3 hours"),
    _course("SD_HARVARD_CS50_INTRO", "CS50's Intro to Computer Science",
            "An introduction to the intellectual enterprises of computer science and programming.",
            "software-dev", "Harvard University", "Beginner", "11 weeks"),
    _course("SD_SKILLINDIA_PYTHON", "Python Programming",
            "Covers Python syntax, data types, functions, and data structures.",
            "software-dev", "Skill India", "Beginner", "8 hours"),
    _course("SD_MICROSOFT_PY_BEGINNER", "Python for Beginners",
            "Short videos on Python fundamentals from the Microsoft developer team.",
            "software-dev", "Microsoft", "Beginner", "4 hours"),
]


def _book(title, topic, slug):
    return dict(title=title, topic=topic, provider="GoalKicker", link=f"https://goalkicker.com/{slug}/")


GIG_BOOKS = [
    _book("Algorithms", "Algorithms / CS Fundamentals", "AlgorithmsBook"),
    _book("Bash", "Shell / DevOps", "BashBook"),
    _book("CSS", "Web / Frontend", "CSSBook"),
    _book("Git", "Version Control / DevOps", "GitBook"),
    _book("HTML5", "Web / Frontend", "HTML5Book"),
    _book("Java", "Programming Language", "JavaBook"),
    _book("JavaScript", "Web / Frontend", "JavaScriptBook"),
    _book("Linux", "OS / DevOps", "LinuxBook"),
    _book("Python", "Programming / Data / Backend", "PythonBook"),
    _book("React JS", "Frontend Framework", "ReactJSBook"),
    _book("SQL", "Database / SQL", "SQLBook"),
]


TRIAL_PROJECTS = [
    dict(code="TRIAL_WEB_01", title="Portfolio Website for Student Developer",
         short_description="Build a responsive personal portfolio site with project gallery and contact form.",
         domain="web-development", skills_required="HTML, CSS, JavaScript, Responsive Design",
         difficulty="Beginner", estimated_hours=10, budget_range="Unpaid trial"),
    dict(code="TRIAL_AI_01", title="Basic Spam Classifier for Emails",
         short_description="Create a simple ML model that classifies emails as spam or not spam using sample data.",
         domain="ai-ml", skills_required="Python, Scikit-learn, Data Preprocessing",
         difficulty="Intermediate", estimated_hours=15, budget_range="Unpaid trial"),
    dict(code="TRIAL_DS_01", title="Sales Dashboard with Data Visualization",
         short_description="Build a dashboard showing monthly sales trends and KPIs using a CSV dataset.",
         domain="data-science", skills_required="Python, Pandas, Data Visualization, Excel/CSV handling",
         difficulty="Intermediate", estimated_hours=12, budget_range="Unpaid trial"),
    dict(code="TRIAL_CYBER_01", title="Basic Vulnerability Assessment Report",
         short_description="Perform a simple security check on a sample web app and prepare a structured report.",
         domain="cybersecurity", skills_required="OWASP basics, Report writing, Security tools (basic)",
         difficulty="Intermediate", estimated_hours=8, budget_range="Unpaid trial"),
]
