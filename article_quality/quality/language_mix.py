"""English/Japanese mixing detector.

Legitimate English (quoted titles, URLs, allowlisted technical vocabulary,
log labels, numbers with units) is masked out first; what remains is scanned
with an ordered list of grammar-level mixing patterns.
"""

from __future__ import annotations

import re

from article_quality.schemas.quality import SEVERITY_RANK, EnglishCheckResult

TECHNICAL_TERMS: tuple[str, ...] = (
    # languages
    "JavaScript", "TypeScript", "Python", "Java", "Go", "Rust", "Ruby", "PHP",
    "C++", "C#", "Swift", "Kotlin", "Scala", "Haskell", "Elixir", "C",
    # frameworks and libraries
    "React", "Vue", "Angular", "Next.js", "Nuxt", "Express", "Django", "Flask",
    "Spring", "Rails", "Laravel", "Node.js", "Deno", "Bun", "Svelte", "Solid",
    "Remix", "Astro", "Vite", "Webpack", "Rollup", "Parcel", "esbuild", "SWC",
    # cloud and infrastructure
    "AWS", "GCP", "Azure", "Docker", "Kubernetes", "Terraform", "Ansible",
    "Jenkins", "GitHub", "GitLab", "Bitbucket", "CircleCI", "Travis", "Vercel",
    "Netlify", "Cloudflare", "Heroku", "DigitalOcean", "Linode", "Vultr",
    # concepts and protocols
    "API", "REST", "GraphQL", "WebSocket", "CI/CD", "DevOps", "AI", "ML",
    "LLM", "HTTP", "HTTPS", "TCP/IP", "DNS", "CDN", "SQL", "NoSQL", "JWT",
    "OAuth", "CORS", "XSS", "CSRF", "SSL", "TLS", "SSH", "FTP", "SMTP",
    "WebRTC", "PWA", "SPA", "SSR", "SSG", "ISR", "CSR", "SEO", "ORM",
    # databases
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB",
    "Firestore", "SQLite", "Oracle", "Cassandra", "MariaDB", "CouchDB",
    "Supabase", "Firebase", "Prisma", "TypeORM", "Sequelize", "Mongoose",
    # editors and tools
    "IDE", "VSCode", "IntelliJ", "npm", "yarn", "pnpm", "git", "bash", "zsh",
    "vim", "emacs", "tmux", "grep", "sed", "awk", "curl", "wget", "jq",
    "Chrome", "Firefox", "Safari", "Edge", "Postman", "Insomnia", "Figma",
    "Sketch", "Adobe", "Photoshop", "Illustrator", "Slack", "Discord", "Teams",
)

TECHNICAL_TERM_SET: frozenset[str] = frozenset(TECHNICAL_TERMS)

# Single private-use code points; stripped from input so they never collide with real text.
QUOTE_MASK = "\ue000"
PATH_MASK = "\ue001"
TECH_MASK = "\ue002"
LOG_MASK = "\ue003"
UNIT_MASK = "\ue004"
_MASK_CHARS_RE = re.compile("[\ue000-\ue004]")

_ASCII_WORD = "A-Za-z0-9_"
_JA = "[ぁ-んァ-ヶー一-龠々]"

_QUOTED_RE = re.compile(r"[「『\"'`]([^」』\"'`]+)[」』\"'`]")
_URL_RE = re.compile(
    rf"https?://[{_ASCII_WORD}\-.~:/?#\[\]@!$&'()*+,;=%]+"
    r"|localhost:\d*"
    rf"|(?<![{_ASCII_WORD}])/[{_ASCII_WORD}\-./]+"
)
_LOG_LABEL_RE = re.compile(r"(?:Error|Warning|Info|Debug):\s*[A-Za-z\s]+")
_UNIT_RE = re.compile(r"\d+\s*(?:GB|MB|KB|ms|s|min|hour|day|TB|PB|ns|μs|px|em|rem|vh|vw|%)", re.IGNORECASE)
_QUOTED_LATIN_RE = re.compile(r"「[^」]*[A-Za-z]+[^」]*」")


def _term_pattern(term: str) -> re.Pattern[str]:
    # Boundaries are ASCII-only so "ReactのuseState" still yields "React".
    escaped = re.escape(term)
    before = rf"(?<![{_ASCII_WORD}])" if re.match(rf"[{_ASCII_WORD}]", term[0]) else ""
    after = rf"(?![{_ASCII_WORD}])" if re.match(rf"[{_ASCII_WORD}]", term[-1]) else ""
    return re.compile(before + escaped + after, re.IGNORECASE)


_TERM_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple((term, _term_pattern(term)) for term in TECHNICAL_TERMS)

# Evaluated in order; overall severity is the maximum over every pattern that matches.
MIXING_PATTERNS: tuple[tuple[re.Pattern[str], str, str], ...] = (
    (re.compile(rf"(?<![{_ASCII_WORD}])(?:This|That|These|Those)\s+{_JA}"), "critical", "英語指示語＋日本語名詞"),
    (re.compile(rf"{_JA}+\s+(?:is|are|was|were|be|been|being)\s+"), "critical", "日本語名詞＋英語be動詞"),
    (re.compile(rf"{_JA}+\s+(?:will|can|could|should|must|may|might)\s+"), "critical", "日本語名詞＋英語助動詞"),
    (re.compile(r"^(?:The|A|An)\s+[a-z]+\s+(?:is|are|was|were)", re.IGNORECASE), "major", "完全な英文の開始"),
    (
        re.compile(rf"(?<![{_ASCII_WORD}])(?:Let's|let's|We|You|I)\s+[a-z]+", re.IGNORECASE),
        "major",
        "英語の命令文・提案文",
    ),
    (re.compile(rf"{_JA}+\s+(?:available|enable|disable|support)", re.IGNORECASE), "minor", "日本語＋英語形容詞/動詞"),
)

_DOWNGRADE = {"critical": "major", "major": "minor", "minor": "none", "none": "none"}


def mask_allowed_english(text: str) -> tuple[str, list[str]]:
    """Return the masked text and the allowlisted terms found, in allowlist order."""
    masked = _MASK_CHARS_RE.sub("", text)
    masked = _QUOTED_RE.sub(QUOTE_MASK, masked)
    masked = _URL_RE.sub(PATH_MASK, masked)

    found: list[str] = []
    for term, pattern in _TERM_PATTERNS:
        masked, count = pattern.subn(TECH_MASK, masked)
        if count:
            found.append(term)

    masked = _LOG_LABEL_RE.sub(LOG_MASK, masked)
    masked = _UNIT_RE.sub(UNIT_MASK, masked)
    return masked, found


def check_english_mixing(summary: str) -> EnglishCheckResult:
    original = _MASK_CHARS_RE.sub("", summary)
    masked, allowed_terms = mask_allowed_english(original)

    phrases: list[str] = []
    severity = "none"
    for pattern, pattern_severity, description in MIXING_PATTERNS:
        match = pattern.search(masked)
        if not match:
            continue
        source_match = pattern.search(original)
        matched_text = source_match.group(0) if source_match else _MASK_CHARS_RE.sub("", match.group(0))
        phrases.append(f"{matched_text.strip()} ({description})")
        if SEVERITY_RANK[pattern_severity] > SEVERITY_RANK[severity]:
            severity = pattern_severity

    has_problem = bool(phrases)
    if has_problem and _QUOTED_LATIN_RE.search(original):
        # Quoted titles legitimately carry English.
        severity = _DOWNGRADE[severity]

    return EnglishCheckResult(
        has_problematic_english=has_problem,
        problematic_phrases=phrases,
        allowed_terms=allowed_terms,
        severity=severity,
    )
