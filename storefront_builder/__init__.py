"""
storefront_builder — composition et rendu de pages boutique / checkout à partir d'un schéma.

  core/       schémas, registry des défauts, i18n, événements d'édition
  sections/   vues typées par type de section
  renderer/   renderers HTML + moteur + timers
  layouts/    layouts par défaut, templates, chargement des documents
  editor/     session d'édition
  gateway     persistance (mémoire / SQLAlchemy)
  api/        router FastAPI
"""
__version__ = "0.1.0"
