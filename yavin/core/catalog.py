"""
Static curriculum catalogs: sections, certificate core set and the search index.

Everything here is built once at import time and never mutated.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class SectionDefinition:
    """A curriculum topic and the XP awarded for completing it."""

    id: str
    name: str
    xp_value: int


@dataclass(frozen=True)
class SearchEntry:
    """One row of the site search index."""

    title: str
    section: str
    url: str
    keywords: Tuple[str, ...] = ()


SECTIONS: Tuple[SectionDefinition, ...] = (
    SectionDefinition("foundations", "Foundations", 100),
    SectionDefinition("learning", "Machine Learning", 150),
    SectionDefinition("neural", "Neural Networks", 150),
    SectionDefinition("deep", "Deep Learning", 200),
    SectionDefinition("modern", "Modern AI", 150),
    SectionDefinition("sequential", "Sequential Flow", 100),
    SectionDefinition("ethics", "Ethics & Society", 100),
    SectionDefinition("glossary", "Glossary", 50),
)

SECTIONS_BY_ID: Mapping[str, SectionDefinition] = MappingProxyType(
    {section.id: section for section in SECTIONS}
)

# Sections required for the completion certificate (catalog order)
CORE_SECTION_IDS: Tuple[str, ...] = (
    "foundations",
    "learning",
    "neural",
    "deep",
    "modern",
    "ethics",
)

PERFECT_QUIZ_BONUS_XP = 50
# Upper bound on time reported by a single progress update
MAX_TIME_SPENT_SECONDS = 24 * 3600
MIN_SEARCH_QUERY_LENGTH = 2


def get_section(section_id: str) -> Optional[SectionDefinition]:
    return SECTIONS_BY_ID.get(section_id)


SEARCH_INDEX: Tuple[SearchEntry, ...] = (
    SearchEntry("What is Artificial Intelligence?", "Foundations", "/foundations#what-is-ai",
                ("ai", "definition", "intelligence", "history")),
    SearchEntry("A Brief History of AI", "Foundations", "/foundations#history",
                ("turing", "dartmouth", "ai winter", "expert systems")),
    SearchEntry("Narrow vs General AI", "Foundations", "/foundations#narrow-general",
                ("agi", "narrow ai", "weak ai", "strong ai")),
    SearchEntry("Supervised Learning", "Machine Learning", "/learning#supervised",
                ("labels", "classification", "regression", "training data")),
    SearchEntry("Unsupervised Learning", "Machine Learning", "/learning#unsupervised",
                ("clustering", "k-means", "dimensionality reduction")),
    SearchEntry("Reinforcement Learning", "Machine Learning", "/learning#reinforcement",
                ("reward", "agent", "policy", "environment")),
    SearchEntry("Overfitting and Generalization", "Machine Learning", "/learning#overfitting",
                ("bias", "variance", "validation", "regularization")),
    SearchEntry("The Artificial Neuron", "Neural Networks", "/neural#neuron",
                ("perceptron", "weights", "bias", "activation")),
    SearchEntry("Backpropagation", "Neural Networks", "/neural#backprop",
                ("gradient descent", "loss", "chain rule", "training")),
    SearchEntry("Activation Functions", "Neural Networks", "/neural#activation",
                ("relu", "sigmoid", "tanh", "softmax")),
    SearchEntry("Convolutional Neural Networks", "Deep Learning", "/deep#cnn",
                ("cnn", "convolution", "image recognition", "pooling")),
    SearchEntry("Recurrent Networks and LSTMs", "Deep Learning", "/deep#rnn",
                ("rnn", "lstm", "sequence", "memory")),
    SearchEntry("Transformers and Attention", "Deep Learning", "/deep#transformers",
                ("attention", "self-attention", "encoder", "decoder")),
    SearchEntry("Large Language Models", "Modern AI", "/modern#llm",
                ("llm", "gpt", "tokens", "pretraining", "chatbot")),
    SearchEntry("Diffusion and Image Generation", "Modern AI", "/modern#diffusion",
                ("diffusion", "generative", "images", "stable diffusion")),
    SearchEntry("Prompting and Fine-tuning", "Modern AI", "/modern#prompting",
                ("prompt engineering", "fine-tuning", "rlhf", "instruction")),
    SearchEntry("How a Model Makes a Prediction", "Sequential Flow", "/sequential#pipeline",
                ("pipeline", "input", "inference", "output")),
    SearchEntry("Bias and Fairness", "Ethics & Society", "/ethics#bias",
                ("fairness", "discrimination", "dataset bias")),
    SearchEntry("Privacy and Surveillance", "Ethics & Society", "/ethics#privacy",
                ("privacy", "data protection", "surveillance", "consent")),
    SearchEntry("AI Safety and Alignment", "Ethics & Society", "/ethics#safety",
                ("alignment", "safety", "misuse", "regulation")),
    SearchEntry("Glossary of AI Terms", "Glossary", "/glossary",
                ("terms", "definitions", "vocabulary")),
    SearchEntry("Code Playground", "Playground", "/playground",
                ("python", "code", "experiment", "try it")),
)
