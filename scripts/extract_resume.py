import sys
from jobboard.config import configure_logging
from jobboard.services.documents import DocumentError, extract_text_from_path
from jobboard.services.postings import skills_from_resume

configure_logging()

if len(sys.argv) < 2:
    print("usage: python scripts/extract_resume.py <resume.pdf|.docx|.txt>"); sys.exit(1)

path = sys.argv[1]
try:
    text = extract_text_from_path(path)
except (DocumentError, OSError) as e:
    print("could not read", path + ":", e); sys.exit(1)

skills = skills_from_resume(text)
print("Skills in", path + ":", ", ".join(skills) or "(none)")
