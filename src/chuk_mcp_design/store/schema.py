"""
SQLite schema for the design index.

Base tables hold the rows; FTS5 external-content tables index them and
are kept in sync by insert/delete triggers.
"""

SCHEMA = """
-- Design tokens
CREATE TABLE IF NOT EXISTS tokens (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  category TEXT NOT NULL,
  subcategory TEXT,
  name TEXT NOT NULL,
  path TEXT NOT NULL,
  css_variable TEXT,
  scss_variable TEXT,
  value_raw TEXT NOT NULL,
  value_number REAL,
  value_unit TEXT,
  value_computed TEXT,
  description TEXT,
  platform TEXT DEFAULT 'all',
  source_file TEXT,
  UNIQUE (category, path)
);

CREATE INDEX IF NOT EXISTS idx_tokens_category ON tokens(category);
CREATE INDEX IF NOT EXISTS idx_tokens_path ON tokens(path);

-- Sub-values of composite tokens (shadows)
CREATE TABLE IF NOT EXISTS token_properties (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  token_id INTEGER REFERENCES tokens(id) ON DELETE CASCADE,
  position INTEGER NOT NULL,
  property TEXT NOT NULL,
  value TEXT NOT NULL,
  value_number REAL,
  value_unit TEXT
);

CREATE INDEX IF NOT EXISTS idx_token_properties_token ON token_properties(token_id);

CREATE VIRTUAL TABLE IF NOT EXISTS tokens_fts USING fts5(
  name,
  path,
  description,
  content=tokens,
  content_rowid=id
);

CREATE TRIGGER IF NOT EXISTS tokens_ai AFTER INSERT ON tokens BEGIN
  INSERT INTO tokens_fts(rowid, name, path, description)
  VALUES (new.id, new.name, new.path, new.description);
END;

CREATE TRIGGER IF NOT EXISTS tokens_ad AFTER DELETE ON tokens BEGIN
  INSERT INTO tokens_fts(tokens_fts, rowid, name, path, description)
  VALUES ('delete', old.id, old.name, old.path, old.description);
END;

-- Documentation
CREATE TABLE IF NOT EXISTS documentation (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  title TEXT NOT NULL,
  path TEXT NOT NULL UNIQUE,
  content TEXT NOT NULL,
  category TEXT,
  keywords TEXT
);

CREATE INDEX IF NOT EXISTS idx_documentation_category ON documentation(category);

CREATE VIRTUAL TABLE IF NOT EXISTS docs_fts USING fts5(
  title,
  content,
  keywords,
  content=documentation,
  content_rowid=id
);

CREATE TRIGGER IF NOT EXISTS docs_ai AFTER INSERT ON documentation BEGIN
  INSERT INTO docs_fts(rowid, title, content, keywords)
  VALUES (new.id, new.title, new.content, new.keywords);
END;

CREATE TRIGGER IF NOT EXISTS docs_ad AFTER DELETE ON documentation BEGIN
  INSERT INTO docs_fts(docs_fts, rowid, title, content, keywords)
  VALUES ('delete', old.id, old.title, old.content, old.keywords);
END;

-- Icons, one row per size
CREATE TABLE IF NOT EXISTS icons (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE,
  icon_name TEXT NOT NULL,
  type TEXT,
  size INTEGER,
  view_box TEXT,
  paths TEXT
);

CREATE INDEX IF NOT EXISTS idx_icons_icon_name ON icons(icon_name);
CREATE INDEX IF NOT EXISTS idx_icons_type ON icons(type);

CREATE VIRTUAL TABLE IF NOT EXISTS icons_fts USING fts5(
  name,
  icon_name,
  type,
  content=icons,
  content_rowid=id
);

CREATE TRIGGER IF NOT EXISTS icons_ai AFTER INSERT ON icons BEGIN
  INSERT INTO icons_fts(rowid, name, icon_name, type)
  VALUES (new.id, new.name, new.icon_name, new.type);
END;

CREATE TRIGGER IF NOT EXISTS icons_ad AFTER DELETE ON icons BEGIN
  INSERT INTO icons_fts(icons_fts, rowid, name, icon_name, type)
  VALUES ('delete', old.id, old.name, old.icon_name, old.type);
END;

-- Components; nested lists are JSON arrays
CREATE TABLE IF NOT EXISTS components (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE,
  slug TEXT NOT NULL,
  category TEXT,
  description TEXT,
  frameworks TEXT,
  props TEXT,
  slots TEXT,
  events TEXT,
  examples TEXT,
  css_classes TEXT
);

CREATE INDEX IF NOT EXISTS idx_components_slug ON components(slug);
CREATE INDEX IF NOT EXISTS idx_components_category ON components(category);

-- CSS-only utilities
CREATE TABLE IF NOT EXISTS css_utilities (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  name TEXT NOT NULL UNIQUE,
  slug TEXT NOT NULL,
  category TEXT NOT NULL,
  description TEXT,
  classes TEXT,
  examples TEXT
);

CREATE INDEX IF NOT EXISTS idx_css_utilities_slug ON css_utilities(slug);
"""
