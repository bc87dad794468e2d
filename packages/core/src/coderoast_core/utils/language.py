import os

LANGUAGE_MAP = {
    ".js": "JavaScript",
    ".ts": "TypeScript",
    ".jsx": "React/JSX",
    ".tsx": "React/TSX",
    ".py": "Python",
    ".go": "Go",
    ".rs": "Rust",
    ".java": "Java",
    ".c": "C",
    ".cpp": "C++",
    ".rb": "Ruby",
    ".php": "PHP",
    ".swift": "Swift",
    ".kt": "Kotlin",
    ".sh": "Shell",
    ".sql": "SQL",
    ".html": "HTML",
    ".css": "CSS",
}

FALLBACK_LANGUAGE = "code"


def detect_language(file_path: str) -> str:
    # Case-sensitive: "main.PY" falls back to "code".
    ext = os.path.splitext(file_path)[1]
    return LANGUAGE_MAP.get(ext, FALLBACK_LANGUAGE)
