from __future__ import annotations

import re
from collections.abc import Iterable

from article_quality.schemas.tags import NormalizedTag

# (canonical name, coarse category, variant patterns); first matching rule wins.
_RULE_SPECS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    # AI / LLM
    ("Claude", "ai-ml", (r"^claude[\s-]?(code|sonnet)?$", r"^claudecode$", r"^claude[\s-]?(\d+|4)[\s-]?(sonnet)?$")),
    (
        "GPT",
        "ai-ml",
        (
            r"^gpt[\s-]?[45]$",
            r"^gpt[\s-]?4\.?\d?$",
            r"^gpt[\s-]?5[\s-]?(thinking|pro|nano)?$",
            r"^chatgpt[\s-]?[45]?$",
            r"^chat[\s-]?gpt$",
        ),
    ),
    ("OpenAI", "ai-ml", (r"^open[\s-]?ai$", r"^openai[\s-]?(api|gpt)?$")),
    (
        "Gemini",
        "ai-ml",
        (r"^gemini(\s+(api|pro|nano|cli))?$", r"^google\s+gemini(\s+api)?$", r"^gemini\s+\d+(\.\d+)?(\s+pro)?$"),
    ),
    ("LLM", "ai-ml", (r"^llms?$", r"^large[\s-]?language[\s-]?model")),
    (
        "AI",
        "ai-ml",
        (
            r"^(生成ai|genai|generative\s+ai|ジェネレーティブai)$",
            r"^ai[\s-]?(生成|画像生成|動画生成)?$",
            r"^画像生成ai$",
            r"^動画生成$",
        ),
    ),
    ("AIエージェント", "ai-ml", (r"^(aiエージェント|ai\s+agent|agentic\s+ai)$",)),
    # Languages
    ("JavaScript", "language", (r"^javascript$", r"^js$")),
    ("TypeScript", "language", (r"^typescript$", r"^ts$")),
    ("Python", "language", (r"^python\s?[23]?$", r"^py$")),
    ("Go", "language", (r"^go(lang)?$",)),
    ("Rust", "language", (r"^rust$",)),
    ("Java", "language", (r"^java$",)),
    ("C++", "language", (r"^c\+\+$", r"^cpp$")),
    ("C#", "language", (r"^c#$", r"^csharp$")),
    ("Ruby", "language", (r"^ruby$", r"^rb$")),
    ("PHP", "language", (r"^php$",)),
    ("Swift", "language", (r"^swift$",)),
    ("Kotlin", "language", (r"^kotlin$",)),
    # Frameworks
    ("React", "framework", (r"^react(\.?js)?$",)),
    ("Vue.js", "framework", (r"^vue(\.?js)?\s?[23]?$",)),
    ("Angular", "framework", (r"^angular(js)?\s?\d*$",)),
    ("Node.js", "framework", (r"^node(\.?js)?$",)),
    ("Next.js", "framework", (r"^next(\.?js)?\s?\d*$",)),
    ("Nuxt.js", "framework", (r"^nuxt(\.?js)?\s?\d*$",)),
    ("Express", "framework", (r"^express(\.?js)?$",)),
    ("Django", "framework", (r"^django$",)),
    ("Flask", "framework", (r"^flask$",)),
    ("Ruby on Rails", "framework", (r"^(rails|ruby\s+on\s+rails)$", r"^ror$")),
    ("Spring", "framework", (r"^spring(\s+boot)?$",)),
    (".NET", "framework", (r"^\.?net(\s+core)?$", r"^dotnet$")),
    ("Tailwind CSS", "framework", (r"^tailwind(\s+css)?$", r"^tailwindcss$")),
    # Cloud and infrastructure
    ("AWS", "cloud", (r"^aws$", r"^amazon\s+web\s+services$")),
    ("GCP", "cloud", (r"^gcp$", r"^google\s+cloud(\s+platform)?$")),
    ("Azure", "cloud", (r"^azure$", r"^microsoft\s+azure$", r"^azure\s+(openai|ai)$")),
    ("Docker", "cloud", (r"^docker$", r"^docker[\s-]?compose$")),
    ("Kubernetes", "cloud", (r"^kubernetes$", r"^k8s$")),
    ("Terraform", "cloud", (r"^terraform$",)),
    ("GitHub", "cloud", (r"^github(\s+actions)?$",)),
    ("GitLab", "cloud", (r"^gitlab(\s+ci)?$",)),
    ("Vercel", "cloud", (r"^vercel$",)),
    ("Netlify", "cloud", (r"^netlify$",)),
    # Databases
    ("PostgreSQL", "database", (r"^postgres(ql)?$",)),
    ("MySQL", "database", (r"^mysql$", r"^mariadb$")),
    ("MongoDB", "database", (r"^mongo(db)?$",)),
    ("Redis", "database", (r"^redis$",)),
    ("SQLite", "database", (r"^sqlite$",)),
    ("Elasticsearch", "database", (r"^elastic(search)?$",)),
    ("Firebase", "database", (r"^firebase$", r"^firestore$")),
    ("Supabase", "database", (r"^supabase$",)),
    ("Prisma", "database", (r"^prisma$",)),
    # Developer tools
    ("VS Code", "tools", (r"^vscode$", r"^visual\s+studio\s+code$")),
    ("Git", "tools", (r"^git$",)),
    ("Webpack", "tools", (r"^webpack$",)),
    ("Vite", "tools", (r"^vite$",)),
    ("npm", "tools", (r"^npm$",)),
    ("Yarn", "tools", (r"^yarn$",)),
    ("pnpm", "tools", (r"^pnpm$",)),
    ("Jest", "tools", (r"^jest$",)),
    ("Vitest", "tools", (r"^vitest$",)),
    ("Playwright", "tools", (r"^playwright$",)),
    ("Cypress", "tools", (r"^cypress$",)),
    ("ESLint", "tools", (r"^eslint$",)),
    ("Prettier", "tools", (r"^prettier$",)),
    # Web
    ("HTML", "web", (r"^html\s?\d?$",)),
    ("CSS", "web", (r"^css\s?\d?$",)),
    ("Sass", "web", (r"^s[ac]ss$",)),
    ("GraphQL", "web", (r"^graphql$",)),
    ("REST API", "web", (r"^rest(\s+api)?$", r"^restful$")),
    ("WebSocket", "web", (r"^websockets?$",)),
    ("Jamstack", "web", (r"^jamstack$",)),
    ("PWA", "web", (r"^pwa$", r"^progressive\s+web\s+app$")),
    # Mobile
    ("React Native", "mobile", (r"^react\s+native$", r"^reactnative$")),
    ("Flutter", "mobile", (r"^flutter$",)),
    ("Ionic", "mobile", (r"^ionic$",)),
    ("Android", "mobile", (r"^android$",)),
    ("iOS", "mobile", (r"^ios$", r"^iphone$", r"^ipad$")),
    # Security
    ("OAuth", "security", (r"^oauth\s?\d?$",)),
    ("JWT", "security", (r"^jwt$", r"^json\s+web\s+token$")),
    ("SSL/TLS", "security", (r"^ssl$", r"^tls$", r"^https$")),
    ("CORS", "security", (r"^cors$",)),
)

_RULES: tuple[tuple[str, str, tuple[re.Pattern[str], ...]], ...] = tuple(
    (canonical, category, tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns))
    for canonical, category, patterns in _RULE_SPECS
)

_WHITESPACE_RE = re.compile(r"\s+")
_UNDERSCORE_RE = re.compile(r"_+")
_ALL_CAPS_RE = re.compile(r"^[A-Z]+$")
_ACRONYM_PREFIX_RE = re.compile(r"^[A-Z]{2,}")


def _basic_normalize(tag: str) -> str:
    if not tag:
        return tag
    normalized = _UNDERSCORE_RE.sub("-", _WHITESPACE_RE.sub(" ", tag)).strip()
    if _ALL_CAPS_RE.match(normalized) or _ACRONYM_PREFIX_RE.match(normalized):
        return normalized
    return normalized[:1].upper() + normalized[1:]


class TagRuleNormalizer:
    """Collapses spelling variants (``GPT-4``, ``chat-gpt``) onto one canonical tag with a category."""

    @staticmethod
    def normalize(tag: str) -> NormalizedTag:
        trimmed = tag.strip()
        for canonical, category, patterns in _RULES:
            if any(pattern.search(trimmed) for pattern in patterns):
                return NormalizedTag(name=canonical, category=category)
        return NormalizedTag(name=_basic_normalize(trimmed), category=None)

    @classmethod
    def normalize_tags(cls, tags: Iterable[str]) -> list[NormalizedTag]:
        by_name: dict[str, NormalizedTag] = {}
        for tag in tags:
            normalized = cls.normalize(tag)
            if normalized.name and normalized.name not in by_name:
                by_name[normalized.name] = normalized
        return list(by_name.values())

    @staticmethod
    def infer_category(tags: Iterable[NormalizedTag]) -> str | None:
        for tag in tags:
            if tag.category:
                return tag.category
        return None
