"""
Built-in task cards loaded into an empty catalog.
"""
from taskdeck.models.enums import CardCategory, CardDifficulty

DEFAULT_CARDS = [
    # Text
    {"title": "Create a Haiku", "description": "Use an AI tool to help you create a haiku about technology.", "category": CardCategory.TEXT, "difficulty": CardDifficulty.EASY},
    {"title": "Summarize an Article", "description": "Find a long article and use AI to create a concise summary of the key points.", "category": CardCategory.TEXT, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Write a Short Story", "description": "Collaborate with AI to write a 500-word short story in the sci-fi genre.", "category": CardCategory.TEXT, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Text Translation", "description": "Translate a paragraph of text from English to three different languages and back to English. Compare the result to the original.", "category": CardCategory.TEXT, "difficulty": CardDifficulty.EASY},
    {"title": "Create a Poem Generator", "description": "Prompt an AI to create a poem generator that can produce poems in specific styles based on user input topics.", "category": CardCategory.TEXT, "difficulty": CardDifficulty.HARD},
    {"title": "AI Writing Assistant", "description": "Create a detailed prompt to help an AI generate a complex academic paper with proper citations and research.", "category": CardCategory.TEXT, "difficulty": CardDifficulty.HARD},

    # Coding
    {"title": "Debug This Code", "description": "Find and fix the bugs in a provided code snippet with the help of AI.", "category": CardCategory.CODING, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Optimize an Algorithm", "description": "Take a simple sorting algorithm and use AI to help you optimize it for better performance.", "category": CardCategory.CODING, "difficulty": CardDifficulty.HARD},
    {"title": "Convert to Another Language", "description": "Convert a JavaScript function to Python using AI assistance.", "category": CardCategory.CODING, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Create a Simple Game", "description": "Use AI to help you create a simple text-based game in your preferred programming language.", "category": CardCategory.CODING, "difficulty": CardDifficulty.HARD},
    {"title": "Generate Unit Tests", "description": "Ask an AI to create unit tests for a given function.", "category": CardCategory.CODING, "difficulty": CardDifficulty.EASY},
    {"title": "Create Documentation", "description": "Use AI to help you generate comprehensive documentation for a piece of code you provide.", "category": CardCategory.CODING, "difficulty": CardDifficulty.EASY},

    # Image
    {"title": "Generate a Landscape", "description": "Use an image generation AI to create a landscape scene based on a written description.", "category": CardCategory.IMAGE, "difficulty": CardDifficulty.EASY},
    {"title": "Image Variation", "description": "Take an existing image and use AI to create several variations with different styles.", "category": CardCategory.IMAGE, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Image Restoration", "description": "Find an old, damaged photo and use AI to restore it.", "category": CardCategory.IMAGE, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Create an Avatar", "description": "Use AI to generate a personalized avatar based on a text description of yourself.", "category": CardCategory.IMAGE, "difficulty": CardDifficulty.EASY},
    {"title": "Style Transfer", "description": "Apply the artistic style of a famous painting to a photograph using AI tools.", "category": CardCategory.IMAGE, "difficulty": CardDifficulty.HARD},
    {"title": "Generate Complex Scene", "description": "Create a detailed prompt to generate a complex image with multiple subjects, specific lighting and atmosphere.", "category": CardCategory.IMAGE, "difficulty": CardDifficulty.HARD},

    # Music
    {"title": "Generate a Melody", "description": "Use AI to create a short melody based on a mood description.", "category": CardCategory.MUSIC, "difficulty": CardDifficulty.EASY},
    {"title": "Complete a Song", "description": "Start composing a simple tune and ask AI to complete it.", "category": CardCategory.MUSIC, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Genre Transformation", "description": "Take a known song and use AI to transform it into a different music genre.", "category": CardCategory.MUSIC, "difficulty": CardDifficulty.HARD},
    {"title": "Create Lyrics", "description": "Use AI to generate lyrics for a song on a specific theme or topic.", "category": CardCategory.MUSIC, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Sound Effects", "description": "Generate various sound effects using AI for a specific scenario (e.g., a rainforest).", "category": CardCategory.MUSIC, "difficulty": CardDifficulty.EASY},
    {"title": "Create Full Composition", "description": "Use AI to generate a complete musical composition with multiple instruments and sections.", "category": CardCategory.MUSIC, "difficulty": CardDifficulty.HARD},

    # Video
    {"title": "Caption Generation", "description": "Upload a short video clip and use AI to generate accurate captions.", "category": CardCategory.VIDEO, "difficulty": CardDifficulty.EASY},
    {"title": "Video Enhancement", "description": "Take a low-resolution video and use AI to enhance its quality.", "category": CardCategory.VIDEO, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Create an Animation", "description": "Use AI tools to create a simple animated sequence based on text prompts.", "category": CardCategory.VIDEO, "difficulty": CardDifficulty.HARD},
    {"title": "Video Summarization", "description": "Find a 10+ minute video and use AI to create a concise summary of its content.", "category": CardCategory.VIDEO, "difficulty": CardDifficulty.MEDIUM},
    {"title": "Style Transfer for Video", "description": "Apply artistic style transfer to a short video clip.", "category": CardCategory.VIDEO, "difficulty": CardDifficulty.HARD},
    {"title": "AI Video Script", "description": "Use AI to generate a compelling script for a short instructional or promotional video.", "category": CardCategory.VIDEO, "difficulty": CardDifficulty.EASY},
]
