from __future__ import annotations

import re
from collections.abc import Iterable

from article_quality.schemas.tags import UNCATEGORIZED, TagCategory

# Evaluated in order; the first category with a matching keyword wins.
CATEGORY_RULES: tuple[tuple[TagCategory, tuple[str, ...]], ...] = (
    (
        TagCategory.LANGUAGES,
        (
            "javascript", "typescript", "python", "go", "golang", "rust", "java", "c++", "c#",
            "ruby", "php", "swift", "kotlin", "scala", "r", "matlab", "perl", "lua", "dart",
            "elixir", "haskell", "clojure", "erlang", "f#", "ocaml", "nim",
        ),
    ),
    (
        TagCategory.FRAMEWORKS,
        (
            "react", "vue", "angular", "next.js", "nextjs", "nuxt", "nuxtjs", "gatsby", "svelte",
            "django", "flask", "rails", "ruby on rails", "express", "fastapi", "spring", "laravel",
            "symfony", "asp.net", "gin", "echo", "fiber", "actix", "rocket", "phoenix", "nest.js",
            "nestjs", "strapi", "remix", "astro", "qwik",
        ),
    ),
    (
        TagCategory.TOOLS,
        (
            "docker", "kubernetes", "k8s", "git", "github", "gitlab", "webpack", "vite", "rollup",
            "parcel", "esbuild", "turbopack", "npm", "yarn", "pnpm", "pip", "poetry", "cargo",
            "maven", "gradle", "jenkins", "circleci", "travis", "github actions", "terraform",
            "ansible", "puppet", "chef", "vagrant", "prometheus", "grafana", "elasticsearch",
            "kibana", "logstash", "redis", "nginx", "apache", "caddy", "pm2", "forever", "nodemon",
        ),
    ),
    (
        TagCategory.CONCEPTS,
        (
            "アルゴリズム", "algorithm", "デザインパターン", "design pattern", "セキュリティ",
            "security", "パフォーマンス", "performance", "テスト", "testing", "test", "tdd", "bdd",
            "ci/cd", "devops", "agile", "scrum", "solid", "dry", "kiss", "yagni", "clean code",
            "refactoring", "リファクタリング", "アーキテクチャ", "architecture", "マイクロサービス",
            "microservices", "api", "rest", "graphql", "websocket", "grpc", "oauth", "jwt",
            "encryption", "暗号化",
        ),
    ),
    (
        TagCategory.PLATFORMS,
        (
            "aws", "amazon web services", "gcp", "google cloud", "azure", "vercel", "netlify",
            "heroku", "digitalocean", "linode", "cloudflare", "firebase", "supabase", "planetscale",
            "railway", "fly.io", "render", "amplify", "github pages", "gitlab pages", "kubernetes",
            "openshift", "cloud foundry", "alibaba cloud", "oracle cloud", "ibm cloud",
        ),
    ),
    (
        TagCategory.DATABASES,
        (
            "mysql", "postgresql", "postgres", "mongodb", "redis", "sqlite", "mariadb", "oracle",
            "sql server", "dynamodb", "cassandra", "elasticsearch", "neo4j", "influxdb", "couchdb",
            "firestore", "fauna", "cockroachdb", "timescaledb", "clickhouse", "prisma", "typeorm",
            "sequelize", "mongoose", "drizzle",
        ),
    ),
    (
        TagCategory.MOBILE,
        (
            "react native", "flutter", "swift", "swiftui", "kotlin", "android", "ios", "xamarin",
            "ionic", "cordova", "capacitor", "expo", "nativescript", "pwa", "progressive web app",
            "mobile", "モバイル", "スマートフォン", "smartphone",
        ),
    ),
    (
        TagCategory.AI_ML,
        (
            "ai", "人工知能", "artificial intelligence", "ml", "機械学習", "machine learning",
            "deep learning", "深層学習", "tensorflow", "pytorch", "keras", "scikit-learn", "pandas",
            "numpy", "jupyter", "chatgpt", "gpt", "llm", "nlp", "自然言語処理", "computer vision",
            "コンピュータビジョン", "neural network", "ニューラルネットワーク",
        ),
    ),
)

_SEPARATOR_RE = re.compile(r"[-._]")

# Substring matching on very short keywords ("go", "r", "ai") would swallow unrelated tags.
_MIN_PARTIAL_KEYWORD_LENGTH = 4


def _keyword_matches(tag: str, keyword: str) -> bool:
    if tag == keyword:
        return True
    if _SEPARATOR_RE.sub("", tag) == _SEPARATOR_RE.sub("", keyword):
        return True
    if len(keyword) >= _MIN_PARTIAL_KEYWORD_LENGTH:
        return keyword in tag or tag in keyword
    return False


def categorize_tag(tag: str) -> TagCategory | None:
    normalized = tag.strip().lower()
    if not normalized:
        return None
    for category, keywords in CATEGORY_RULES:
        if any(_keyword_matches(normalized, keyword) for keyword in keywords):
            return category
    return None


def categorize_multiple_tags(tags: Iterable[str]) -> dict[str, list[str]]:
    buckets: dict[str, list[str]] = {}
    for tag in tags:
        category = categorize_tag(tag)
        key = category.value if category else UNCATEGORIZED
        buckets.setdefault(key, []).append(tag)
    return buckets


def get_tag_statistics(tags: Iterable[str]) -> dict[str, int]:
    return {key: len(values) for key, values in categorize_multiple_tags(tags).items()}
