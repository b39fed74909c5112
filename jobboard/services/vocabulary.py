# jobboard/services/vocabulary.py
"""
Static skill vocabularies.

EXTRACTION_VOCABULARY is the curated catalogue the extractor runs against when
no store is configured (and the base the store overlays when one is).
SEED_SKILLS seeds the `skill` table and is the last-resort dictionary of the
normalizer. FALLBACK_ALIASES covers the common variants that must resolve even
with the store down.

Aliases are lowercase; several carry German spellings so German resumes match.
"""
from typing import Dict, List

from .entries import SkillEntry


def _entries(category: str, rows) -> List[SkillEntry]:
    return [SkillEntry(name=name, category=category, aliases=tuple(aliases)) for name, aliases in rows]


EXTRACTION_VOCABULARY: List[SkillEntry] = (
    _entries("Programming", [
        ("JavaScript", ["javascript", "java script", "js", "ecmascript"]),
        ("TypeScript", ["typescript", "type script", "ts"]),
        ("Python", ["python"]),
        ("Java", ["java"]),
        # no bare "c": it is a letter far more often than a language
        ("C", ["c language", "ansi c", "c-lang"]),
        ("C++", ["c++", "cpp", "c plus plus"]),
        ("C#", ["c#", "c sharp", "c-sharp"]),
        ("Go", ["go", "golang"]),
        ("Rust", ["rust"]),
        ("PHP", ["php"]),
        ("Ruby", ["ruby"]),
        ("Swift", ["swift"]),
        ("Kotlin", ["kotlin"]),
        ("Dart", ["dart"]),
        ("SQL", ["sql"]),
    ])
    + _entries("Frontend", [
        ("HTML", ["html", "html5"]),
        ("CSS", ["css", "css3"]),
        ("Sass", ["sass", "scss"]),
        ("React", ["react", "reactjs", "react.js", "react js"]),
        ("React Native", ["react native"]),
        ("Next.js", ["next", "nextjs", "next.js", "next js"]),
        ("Angular", ["angular", "angularjs", "angular.js", "angular js"]),
        ("Vue.js", ["vue", "vuejs", "vue.js", "vue js"]),
        ("Svelte", ["svelte"]),
        ("Vite", ["vite"]),
        ("Tailwind CSS", ["tailwind", "tailwindcss", "tailwind css"]),
        ("Bootstrap", ["bootstrap"]),
    ])
    + _entries("Backend", [
        ("Node.js", ["node", "nodejs", "node.js", "node js"]),
        ("Express", ["express", "expressjs", "express.js", "express js"]),
        ("NestJS", ["nestjs", "nest.js", "nest js"]),
        ("Django", ["django"]),
        ("Flask", ["flask"]),
        ("FastAPI", ["fastapi", "fast api"]),
        ("Spring Boot", ["spring", "spring-boot", "spring boot"]),
        (".NET", [".net", "dotnet", "asp.net", "asp net", "aspnet"]),
        ("GraphQL", ["graphql"]),
        ("REST", ["rest", "restful", "rest api", "restful api"]),
    ])
    + _entries("Databases", [
        ("PostgreSQL", ["postgres", "postgresql", "psql"]),
        ("MySQL", ["mysql", "maria db", "mariadb"]),
        ("SQLite", ["sqlite"]),
        ("MongoDB", ["mongodb", "mongo"]),
        ("Redis", ["redis"]),
    ])
    + _entries("DevOps", [
        ("Docker", ["docker", "docker compose", "docker-compose"]),
        ("Kubernetes", ["k8s", "kubernetes"]),
        ("CI/CD", ["ci/cd", "cicd", "ci cd"]),
        ("GitHub Actions", ["github actions", "gh actions"]),
        ("GitLab CI", ["gitlab ci", "gitlab-ci", "gitlab ci/cd"]),
        ("AWS", ["aws", "amazon web services"]),
        ("GCP", ["gcp", "google cloud", "google cloud platform"]),
        ("Azure", ["azure", "microsoft azure"]),
        ("Linux", ["linux", "gnu/linux"]),
        ("Nginx", ["nginx"]),
    ])
    + _entries("Tools", [
        ("Prisma", ["prisma"]),
        ("Knex", ["knex", "knex.js", "knexjs"]),
        ("TypeORM", ["typeorm"]),
        ("Jest", ["jest"]),
        ("Vitest", ["vitest"]),
        ("Cypress", ["cypress"]),
        ("Playwright", ["playwright"]),
    ])
    + _entries("Office", [
        ("MS Office", ["microsoft office", "ms office"]),
        ("Excel", ["excel", "ms excel", "microsoft excel", "tabellenkalkulation", "pivot", "vlookup"]),
        ("Word", ["word", "ms word", "microsoft word", "textverarbeitung"]),
        ("PowerPoint", ["powerpoint", "ms powerpoint", "microsoft powerpoint", "präsentation", "prasentation"]),
        ("Outlook", ["outlook", "microsoft outlook"]),
        ("Google Docs", ["google docs", "docs"]),
        ("Google Sheets", ["google sheets", "sheets", "tabellen", "tabellenkalkulation (google)"]),
        ("Google Slides", ["google slides", "slides"]),
        ("Google Drive", ["google drive", "drive"]),
        ("Microsoft Teams", ["microsoft teams", "ms teams"]),
        ("Zoom", ["zoom"]),
        ("Google Meet", ["google meet"]),
        ("Slack", ["slack"]),
    ])
    + _entries("Data & AI", [
        ("Artificial Intelligence (AI)", [
            "ai", "artificial intelligence",
            "künstliche intelligenz", "kunstliche intelligenz", "ki", "ki-tools", "ki tools",
        ]),
        ("ChatGPT", ["chatgpt", "openai chatgpt", "gpt"]),
        ("Prompt Engineering", ["prompt engineering", "prompting"]),
        ("Data Analysis", ["data analysis", "datenanalyse", "auswertung"]),
        ("Data Management", ["data management", "datenverwaltung", "daten verwaltung", "datenmanagement"]),
    ])
    + _entries("Administration", [
        ("Office Administration", ["office administration", "büroverwaltung", "büroadministration", "office management"]),
        ("Reception / Front Office", ["empfang", "rezeption", "front office", "telefonzentrale", "reception"]),
        ("Phone Support", ["telefonsupport", "hotline", "callcenter", "call center", "telefonischer support"]),
        ("Scheduling", [
            "terminplanung", "terminierung", "termin koordination", "termin-koordination",
            "kalenderverwaltung", "kalenderpflege",
        ]),
        ("Meeting Minutes", ["protokoll", "protokollführung", "besprechungsprotokoll"]),
        ("Document Management", ["dokumentenverwaltung", "ablage", "aktenführung", "dateiverwaltung"]),
        ("Data Entry", ["datenerfassung", "dateneingabe", "datenpflege"]),
        ("Reporting", ["reporting", "berichte", "berichtswesen", "reports"]),
        ("CRM", ["crm", "kundenbeziehungsmanagement", "salesforce", "hubspot"]),
        ("Ticketing", [
            "ticketsystem", "ticketing", "zendesk", "freshdesk", "otrs",
            "jira service management", "servicedesk",
        ]),
        ("Troubleshooting", [
            "troubleshooting", "fehlersuche", "störungsbeseitigung", "problembehebung", "stoerungsbeseitigung",
        ]),
        ("Quality Assurance", ["qualitätssicherung", "qa"]),
        ("Email Correspondence", [
            "e-mail", "email", "e-mail-korrespondenz", "e-mail korrespondenz", "mailverkehr", "schriftverkehr",
        ]),
    ])
    + _entries("Soft Skills", [
        ("Customer Service", ["customer service", "kundendienst", "kundenservice", "kundenbetreuung"]),
        ("Communication", [
            "communication", "kommunikation", "professionelle kommunikation",
            "schriftliche kommunikation", "mündliche kommunikation", "telefonische kommunikation",
            "verbal communication", "written communication", "email kommunikation",
        ]),
        ("Teamwork", ["teamwork", "teamarbeit", "teamfähigkeit", "team player"]),
        ("Problem Solving", ["problem solving", "problemlösung", "problemlösungsfähigkeit", "analytisches denken"]),
        ("Time Management", ["time management", "zeitmanagement", "deadline management", "termintreue"]),
        ("Adaptability", ["adaptability", "anpassungsfähigkeit", "flexibilität"]),
        ("Organization", ["organisation", "organizational skills", "organisationsfähigkeit"]),
        ("Attention to Detail", ["attention to detail", "detailorientiert", "detail-orientiert", "genauigkeit"]),
        ("Leadership", ["leadership", "führung", "führungskompetenz"]),
        ("Project Management", ["project management", "projektmanagement", "scrum", "kanban", "agile", "agil"]),
    ])
    + _entries("Marketing & Sales", [
        ("Sales", ["sales", "vertrieb", "verkauf"]),
        ("Marketing", ["marketing"]),
        ("Social Media", ["social media", "soziale medien", "content erstellung", "content-erstellung"]),
        ("Canva", ["canva"]),
        ("Instagram", ["instagram"]),
        ("TikTok", ["tiktok", "tik tok"]),
        ("Facebook", ["facebook"]),
    ])
    + _entries("Languages", [
        ("Arabic", ["arabic", "arabisch", "arabe"]),
        ("English", ["english", "englisch"]),
        ("German", ["german", "deutsch"]),
        ("French", ["french", "französisch", "franzosisch", "francais"]),
    ])
)


SEED_SKILLS: Dict[str, List[SkillEntry]] = {
    "Programming": _entries("Programming", [
        ("JavaScript", ["JS", "Javascript"]),
        ("TypeScript", ["TS", "Typescript"]),
        ("Python", ["Py"]),
        ("Java", []),
        ("C++", ["CPP"]),
        ("C#", ["C Sharp"]),
        ("PHP", []),
        ("Ruby", []),
        ("Go", ["Golang"]),
        ("Swift", []),
        ("Kotlin", []),
        ("Scala", []),
        ("Perl", []),
        ("Rust", []),
        ("MATLAB", []),
        ("R", ["R Language"]),
        ("Dart", []),
    ]),
    "Frameworks": _entries("Frameworks", [
        ("React", ["ReactJS", "React.js"]),
        ("Angular", ["AngularJS", "Angular.js"]),
        ("Vue", ["VueJS", "Vue.js"]),
        ("Express", ["ExpressJS", "Express.js"]),
        ("Django", []),
        ("Flask", []),
        ("Spring", ["Spring Boot"]),
        ("Laravel", []),
        ("Ruby on Rails", ["Rails"]),
        ("Next.js", ["NextJS"]),
        ("Nuxt.js", ["NuxtJS"]),
        ("Svelte", ["SvelteJS", "Svelte.js"]),
        ("ASP.NET", ["ASP.NET Core", "ASP.NET MVC"]),
        ("Symfony", []),
        ("Meteor", []),
        ("NestJS", ["Nest.js"]),
    ]),
    "Databases": _entries("Databases", [
        ("MySQL", []),
        ("PostgreSQL", ["Postgres"]),
        ("SQLite", []),
        ("MongoDB", ["Mongo"]),
        ("Redis", []),
        ("Oracle", ["OracleDB"]),
        ("MariaDB", []),
        ("Elasticsearch", []),
        ("Cassandra", []),
        ("Firebase", ["Firestore"]),
        ("DynamoDB", []),
    ]),
    "Cloud": _entries("Cloud", [
        ("AWS", ["Amazon Web Services"]),
        ("Azure", ["Microsoft Azure"]),
        ("Google Cloud", ["GCP", "Google Cloud Platform"]),
        ("Heroku", []),
        ("DigitalOcean", []),
        ("Netlify", []),
        ("Vercel", []),
        ("IBM Cloud", []),
    ]),
    "DevOps": _entries("DevOps", [
        ("Docker", []),
        ("Kubernetes", ["K8s"]),
        ("Jenkins", []),
        ("Travis CI", []),
        ("CircleCI", []),
        ("GitLab CI", ["GitLab CI/CD"]),
        ("Ansible", []),
        ("Terraform", []),
        ("Bash", ["Shell Scripting"]),
        ("Puppet", []),
        ("Chef", []),
        ("Nginx", []),
        ("Apache", ["Apache HTTP Server"]),
    ]),
    "Tools": _entries("Tools", [
        ("Git", ["GitHub", "GitLab", "Bitbucket"]),
        ("JIRA", []),
        ("Trello", []),
        ("Slack", []),
        ("Notion", []),
        ("Figma", []),
        ("Photoshop", ["Adobe Photoshop"]),
        ("Illustrator", ["Adobe Illustrator"]),
        ("MS Office", ["Microsoft Office", "Word", "Excel", "PowerPoint"]),
        ("VS Code", ["Visual Studio Code"]),
        ("IntelliJ", ["IntelliJ IDEA"]),
        ("Eclipse", []),
        ("Xcode", []),
        ("Android Studio", []),
    ]),
    "Languages": _entries("Languages", [
        ("English", ["Englisch"]),
        ("German", ["Deutsch"]),
        ("French", ["Französisch"]),
        ("Spanish", ["Espanol", "Spanisch"]),
        ("Italian", ["Italienisch"]),
        ("Arabic", ["Arabe", "Arabisch"]),
        ("Russian", ["Russisch"]),
        ("Turkish", ["Türkisch", "Turkce"]),
        ("Dutch", ["Nederlands"]),
        ("Chinese", ["Mandarin", "Chinesisch"]),
        ("Japanese", ["Japanisch"]),
        ("Polish", ["Polnisch"]),
        ("Romanian", ["Rumänisch"]),
        ("Portuguese", ["Portugiesisch"]),
        ("Hindi", []),
    ]),
    "SoftSkills": _entries("SoftSkills", [
        ("Teamwork", ["Collaboration", "Team player", "Teamfähigkeit"]),
        ("Communication", ["Verbal Communication", "Written Communication", "Kommunikation"]),
        ("Leadership", ["Lead", "Führungskompetenz"]),
        ("Problem Solving", ["Analytical Thinking", "Problemlösungsfähigkeit"]),
        ("Time Management", ["Deadline Management", "Zeitmanagement"]),
        ("Adaptability", ["Flexibility", "Anpassungsfähigkeit"]),
        ("Creativity", ["Kreativität"]),
        ("Attention to Detail", ["Detail Oriented", "Genauigkeit"]),
        ("Critical Thinking", ["Kritisches Denken"]),
        ("Responsibility", ["Verantwortungsbewusstsein"]),
        ("Work Ethic", ["Arbeitsmoral"]),
        ("Self-motivation", ["Eigenmotivation"]),
    ]),
    "Other": _entries("Other", [
        ("Driving License", ["Führerschein", "Permis de conduire"]),
        ("Project Management", ["PM", "Projektmanagement"]),
        ("Customer Service", ["Kundendienst"]),
        ("Data Analysis", ["Datenanalyse"]),
        ("Agile", ["Scrum", "Kanban"]),
        ("Sales", []),
        ("Marketing", []),
        ("Accounting", ["Buchhaltung"]),
        ("Finance", ["Finanzen"]),
        ("Teaching", ["Lehre"]),
        ("Research", ["Forschung"]),
    ]),
}


def seed_entries() -> List[SkillEntry]:
    """SEED_SKILLS flattened, in category order."""
    out = []
    for entries in SEED_SKILLS.values():
        out.extend(entries)
    return out


# alias (lowercase) -> canonical name
FALLBACK_ALIASES: Dict[str, str] = {
    # web core
    "html": "HTML",
    "html5": "HTML",
    "css": "CSS",
    "css3": "CSS",
    "sass": "Sass",
    "scss": "Sass",

    # js/ts
    "javascript": "JavaScript",
    "java script": "JavaScript",
    "js": "JavaScript",
    "typescript": "TypeScript",
    "type script": "TypeScript",
    "ts": "TypeScript",

    # react/next
    "react": "React",
    "reactjs": "React",
    "react.js": "React",
    "react js": "React",
    "next": "Next.js",
    "nextjs": "Next.js",
    "next.js": "Next.js",
    "next js": "Next.js",

    # node/express
    "node": "Node.js",
    "nodejs": "Node.js",
    "node.js": "Node.js",
    "node js": "Node.js",
    "express": "Express",
    "expressjs": "Express",
    "express.js": "Express",
    "express js": "Express",

    # db / infra / cloud
    "sql": "SQL",
    "postgres": "PostgreSQL",
    "postgresql": "PostgreSQL",
    "psql": "PostgreSQL",
    "mongodb": "MongoDB",
    "mongo": "MongoDB",
    "redis": "Redis",
    "docker": "Docker",
    "docker compose": "Docker",
    "docker-compose": "Docker",
    "k8s": "Kubernetes",
    "kubernetes": "Kubernetes",
    "aws": "AWS",
    "amazon web services": "AWS",
    "gcp": "Google Cloud",
    "google cloud": "Google Cloud",
    "google cloud platform": "Google Cloud",
    "azure": "Azure",

    # .net / c-family
    ".net": ".NET",
    "dotnet": ".NET",
    "asp.net": ".NET",
    "asp net": ".NET",
    "c#": "C#",
    "c sharp": "C#",
    "c-sharp": "C#",
    "c++": "C++",
    "cpp": "C++",

    # tools
    "git": "Git",
    "github": "Git",
    "gitlab": "Git",
    "bitbucket": "Git",

    # spoken languages & ML
    "englisch": "English",
    "deutsch": "German",
    "ml": "Machine Learning",
    "machine learning": "Machine Learning",
}
