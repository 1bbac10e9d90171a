"""Detection tables for the stack detector.

All matching is heuristic: a marker file counts regardless of its contents,
and a keyword counts wherever it appears in a source file.
"""

from __future__ import annotations

# (marker_file, label), relative to the project root
MARKER_RULES: list[tuple[str, str]] = [
    ("webpack.config.js", "Webpack"),
    ("vite.config.js", "Vite"),
    ("gulpfile.js", "Gulp"),
    ("Gruntfile.js", "Grunt"),
    ("postcss.config.js", "PostCSS"),
    ("tailwind.config.js", "Tailwind CSS"),
    (".babelrc", "Babel"),
    ("babel.config.js", "Babel"),
    ("tsconfig.json", "TypeScript"),
    (".stylelintrc", "Stylelint"),
    (".eslintrc", "ESLint"),
    ("storybook/main.js", "Storybook"),
]

# dependency name -> label (checked in dependencies and devDependencies)
CSS_FRAMEWORK_DEPENDENCIES: dict[str, str] = {
    "bootstrap": "Bootstrap",
}

# (file extension, label) found anywhere in the tree
STYLESHEET_RULES: list[tuple[str, str]] = [
    (".scss", "SCSS (Sass)"),
]

# Case-sensitive substring -> label
KEYWORD_RULES: list[tuple[str, str]] = [
    ("react", "React"),
    ("vue", "Vue"),
    ("next", "Next.js"),
    ("nuxt", "Nuxt.js"),
    ("lit", "Lit"),
]

# Conventional source directories, scanned one level deep
SOURCE_DIRS: tuple[str, ...] = ("src", "components", "js", "scripts")
SCRIPT_EXTENSION = ".js"

# Directories to skip during the recursive stylesheet scan
SKIP_DIRS = {
    "node_modules",
    ".git",
    "dist",
    "build",
    "vendor",
}
