"""Default catalog loaded into a fresh store at start-up."""
from __future__ import annotations

from learnhub.domain.learning.models import (
    Lesson,
    Project,
    ProjectStep,
    ResearchPaper,
    Topic,
    TopicContent,
)
from learnhub.persistence.interfaces.storage import Storage


def default_topics() -> list[Topic]:
    return [
        Topic(
            id="ml-basics",
            name="ml-basics",
            title="Machine Learning Basics",
            description="Introduction to machine learning concepts and algorithms",
            category="Machine Learning",
            difficulty="beginner",
            estimated_time=120,
            tags=["basics", "introduction"],
            connections=["neural-networks"],
            content=TopicContent(
                lessons=[
                    Lesson(
                        id="ml-intro",
                        title="What is Machine Learning?",
                        content="Machine learning is a subset of artificial intelligence...",
                        type="article",
                        estimated_time=30,
                    ),
                ],
                prerequisites=[],
                learning_objectives=["Understand ML concepts", "Identify ML types"],
            ),
        ),
        Topic(
            id="neural-networks",
            name="neural-networks",
            title="Neural Networks Fundamentals",
            description="Learn the basic building blocks of deep learning",
            category="Deep Learning",
            difficulty="intermediate",
            estimated_time=180,
            tags=["neural networks", "deep learning"],
            connections=["cnn", "rnn"],
            content=TopicContent(
                lessons=[
                    Lesson(
                        id="nn-intro",
                        title="Introduction to Neural Networks",
                        content="Neural networks are computing systems inspired by biological neural networks...",
                        type="article",
                        estimated_time=45,
                    ),
                ],
                prerequisites=["ml-basics"],
                learning_objectives=["Understand neurons", "Build simple networks"],
            ),
        ),
        Topic(
            id="cnn",
            name="cnn",
            title="Convolutional Neural Networks",
            description="Image recognition and computer vision fundamentals",
            category="Computer Vision",
            difficulty="intermediate",
            estimated_time=240,
            tags=["cnn", "computer vision"],
            connections=["neural-networks", "image-processing"],
            content=TopicContent(
                lessons=[
                    Lesson(
                        id="cnn-intro",
                        title="CNN Architecture",
                        content="Convolutional Neural Networks are specialized for processing grid-like data...",
                        type="article",
                        estimated_time=60,
                    ),
                ],
                prerequisites=["neural-networks"],
                learning_objectives=["Understand convolution", "Build CNN models"],
            ),
        ),
    ]


def default_projects() -> list[Project]:
    return [
        Project(
            id="image-classifier",
            title="Build an Image Classifier",
            description="Create a CNN model to classify images using TensorFlow",
            difficulty="intermediate",
            category="Computer Vision",
            estimated_time=180,
            technologies=["Python", "TensorFlow", "Keras"],
            steps=[
                ProjectStep(
                    id="step1",
                    title="Set up the environment",
                    description="Install required libraries and import datasets",
                    hints=["Use pip install tensorflow", "Download CIFAR-10 dataset"],
                ),
            ],
            starter_code="import tensorflow as tf\n# Your code here",
            solution_code="# Complete solution will be provided after submission",
        ),
    ]


def default_papers() -> list[ResearchPaper]:
    return [
        ResearchPaper(
            id="attention-is-all-you-need",
            title="Attention Is All You Need",
            authors=["Ashish Vaswani", "Noam Shazeer", "Niki Parmar"],
            abstract=(
                "The dominant sequence transduction models are based on complex "
                "recurrent or convolutional neural networks..."
            ),
            url="https://arxiv.org/abs/1706.03762",
            published_date="2017-06-12T00:00:00+00:00",
            category="Natural Language Processing",
            tags=["transformer", "attention", "nlp"],
            ai_summary=(
                "Introduces the Transformer architecture that relies entirely on "
                "attention mechanisms, eliminating recurrence and convolutions."
            ),
            trending_score=95,
            reading_time=25,
        ),
    ]


def seed_storage(storage: Storage) -> None:
    """Insert the default catalog. Existing ids are overwritten."""
    for topic in default_topics():
        storage.create_topic(topic)
    for project in default_projects():
        storage.create_project(project)
    for paper in default_papers():
        storage.create_research_paper(paper)
