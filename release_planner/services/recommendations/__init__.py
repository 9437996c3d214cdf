from .similarity import extract_keywords, jaccard_similarity, group_similar_items
from .synthesizer import generate_recommendations

__all__ = [
    "extract_keywords",
    "jaccard_similarity",
    "group_similar_items",
    "generate_recommendations",
]
