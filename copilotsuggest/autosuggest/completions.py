"""
Static completion tables.

``SYNTHETIC_COMPLETIONS`` is a curated prefix -> completions map; for a
typed prefix only the best (longest already-typed) key is used.
``BASE_SUGGESTIONS`` is the chat input's static prompt table, passed to
the engine by callers and matched against every key.
``FEATURED_SUGGESTIONS`` is offered, shuffled, for an empty input.
"""

from __future__ import annotations

SYNTHETIC_COMPLETIONS: dict[str, list[str]] = {
    # "how to" queries
    "how to": [
        "how to learn python programming",
        "how to write a cover letter",
        "how to cook pasta perfectly",
        "how to start a business",
        "how to improve productivity",
    ],
    "how to b": [
        "how to bake a chocolate cake",
        "how to build a website from scratch",
        "how to become a data scientist",
        "how to budget your money",
        "how to backup your phone",
    ],
    "how to be": [
        "how to become a software developer",
        "how to become more productive",
        "how to beat procrastination",
        "how to be more confident",
        "how to become a data scientist",
    ],
    "how to bec": [
        "how to become a software engineer",
        "how to become a data scientist",
        "how to become more productive",
        "how to become a better writer",
        "how to become a freelancer",
    ],
    "how to become": [
        "how to become a software engineer",
        "how to become a data scientist",
        "how to become a full stack developer",
        "how to become a better writer",
        "how to become a freelancer",
    ],
    "how to become a": [
        "how to become a software engineer",
        "how to become a data scientist",
        "how to become a full stack developer",
        "how to become a machine learning engineer",
        "how to become a better programmer",
    ],
    "how to become a b": [
        "how to become a better programmer",
        "how to become a better writer",
        "how to become a backend developer",
        "how to become a business analyst",
        "how to become a blockchain developer",
    ],
    # "what is" queries
    "what is": [
        "what is machine learning",
        "what is the difference between AI and ML",
        "what is Python used for",
        "what is cloud computing",
        "what is the best programming language",
    ],
    "what is t": [
        "what is the best laptop for programming",
        "what is TypeScript",
        "what is the difference between Java and JavaScript",
        "what is TensorFlow",
        "what is the cloud",
    ],
    "what is th": [
        "what is the best way to learn coding",
        "what is the difference between React and Angular",
        "what is the cloud",
        "what is the metaverse",
        "what is the best IDE for Python",
    ],
    "best": [
        "best programming language to learn in 2024",
        "best laptop for developers",
        "best way to learn coding",
        "best practices for software development",
        "best online courses for programming",
    ],
    "best p": [
        "best programming language for beginners",
        "best Python IDE",
        "best practices for API design",
        "best podcasts for developers",
        "best programming books",
    ],
    "learn": [
        "learn Python for beginners",
        "learn JavaScript in 30 days",
        "learn machine learning",
        "learn web development",
        "learn data science",
    ],
    "learn p": [
        "learn Python from scratch",
        "learn Python for data science",
        "learn programming basics",
        "learn Python with projects",
        "learn Python automation",
    ],
    "explain": [
        "explain machine learning to me",
        "explain the difference between API and SDK",
        "explain cloud computing",
        "explain how neural networks work",
        "explain Docker containers",
    ],
    "write": [
        "write a Python script to download files",
        "write a cover letter for software engineer",
        "write a poem about technology",
        "write a SQL query to find duplicates",
        "write a resume summary",
    ],
    "write a": [
        "write a Python script for web scraping",
        "write a cover letter for me",
        "write a business email",
        "write a thank you note",
        "write a function to sort an array",
    ],
    "help": [
        "help me write code in Python",
        "help me understand machine learning",
        "help me debug this code",
        "help me learn JavaScript",
        "help me with my resume",
    ],
    "help me": [
        "help me learn Python programming",
        "help me write a cover letter",
        "help me understand recursion",
        "help me with my homework",
        "help me plan a trip to Japan",
    ],
    "plan": [
        "plan a trip to Japan",
        "plan a vacation on a budget",
        "plan a road trip across Europe",
        "plan a surprise birthday party",
        "plan healthy meals for the week",
    ],
    "plan a": [
        "plan a trip to Tokyo",
        "plan a weekend getaway",
        "plan a wedding on a budget",
        "plan a career change",
        "plan a successful project",
    ],
    "recipe": [
        "recipe for chocolate chip cookies",
        "recipe for pasta carbonara",
        "recipe for healthy smoothies",
        "recipe for banana bread",
        "recipe for homemade pizza",
    ],
    "python": [
        "Python tutorial for beginners",
        "Python list comprehension examples",
        "Python pandas dataframe tutorial",
        "Python web scraping guide",
        "Python API development",
    ],
    "code": [
        "code to reverse a string in Python",
        "code editor for beginners",
        "code review best practices",
        "code to sort an array",
        "code examples for machine learning",
    ],
    "can": [
        "can you help me write code",
        "can you explain machine learning",
        "can you create an image of",
        "can you summarize this article",
        "can AI replace programmers",
    ],
    "can you": [
        "can you help me with Python",
        "can you explain this code",
        "can you write a cover letter",
        "can you create a website",
        "can you generate an image",
    ],
    "who is": [
        "who is the CEO of Google",
        "who is Elon Musk",
        "who is the best software developer",
        "who is the richest person in the world",
        "who is the creator of JavaScript",
    ],
    "where to": [
        "where to learn Python for free",
        "where to find coding jobs",
        "where to host a web app",
        "where to learn data science",
        "where to buy a domain name",
    ],
    "why": [
        "why learn programming",
        "why is Python popular",
        "why use TypeScript",
        "why is AI important",
        "why learn machine learning",
    ],
    "why is": [
        "why is Python so popular",
        "why is JavaScript everywhere",
        "why is AI the future",
        "why is coding important",
        "why is React better than Angular",
    ],
    "should i": [
        "should I learn Python first",
        "should I use a framework",
        "should I learn cloud computing",
        "should I become a data scientist",
        "should I learn multiple languages",
    ],
    "tell me": [
        "tell me about artificial intelligence",
        "tell me how to code",
        "tell me about cloud computing",
        "tell me about data science",
        "tell me about JavaScript",
    ],
    "show me": [
        "show me how to learn Python",
        "show me coding tutorials",
        "show me web development examples",
        "show me AI projects",
        "show me how to use Git",
    ],
    "i want to": [
        "I want to learn Python from scratch",
        "I want to become a software engineer",
        "I want to build a mobile app",
        "I want to learn machine learning",
        "I want to start a tech company",
    ],
    "create": [
        "create a website for me",
        "create a Python script",
        "create a mobile app",
        "create a logo",
        "create a business plan",
    ],
    "build": [
        "build a website from scratch",
        "build a mobile app",
        "build a REST API",
        "build a machine learning model",
        "build a chatbot",
    ],
    "compare": [
        "compare Python and JavaScript",
        "compare React and Vue",
        "compare AWS and Azure",
        "compare different programming languages",
        "compare machine learning frameworks",
    ],
}

BASE_SUGGESTIONS: dict[str, list[str]] = {
    "how": [
        "How do I center a div in CSS?",
        "How does machine learning work?",
        "How to make a good first impression?",
        "How can I improve my memory?",
        "How to start investing in stocks?",
    ],
    "what": [
        "What is the difference between React and Vue?",
        "What are the best practices for REST APIs?",
        "What should I learn after JavaScript?",
        "What causes climate change?",
        "What is quantum entanglement?",
    ],
    "why": [
        "Why is the sky blue?",
        "Why do we dream?",
        "Why is TypeScript better than JavaScript?",
        "Why do cats purr?",
        "Why is sleep important for productivity?",
    ],
    "can": [
        "Can you explain recursion with an example?",
        "Can you write a Python script to sort files?",
        "Can AI become sentient?",
        "Can you help me prepare for a job interview?",
        "Can you create a meal plan for weight loss?",
    ],
    "help": [
        "Help me write a professional email",
        "Help me understand async/await in JavaScript",
        "Help me create a workout routine",
        "Help me plan a birthday party",
        "Help me debug this code",
    ],
    "write": [
        "Write a haiku about programming",
        "Write a cover letter for a software engineer position",
        "Write a short story about time travel",
        "Write a LinkedIn post about my new project",
        "Write unit tests for this function",
    ],
    "create": [
        "Create a regex for email validation",
        "Create a weekly meal plan",
        "Create a study schedule for learning Python",
        "Create a marketing tagline for my app",
        "Create a character for my story",
    ],
    "explain": [
        "Explain blockchain in simple terms",
        "Explain the difference between HTTP and HTTPS",
        "Explain how neural networks learn",
        "Explain the theory of relativity",
        "Explain CSS flexbox vs grid",
    ],
    "give": [
        "Give me 5 project ideas for my portfolio",
        "Give me tips for public speaking",
        "Give me a motivational quote",
        "Give me feedback on my resume",
        "Give me book recommendations for entrepreneurs",
    ],
    "tell": [
        "Tell me a joke about programming",
        "Tell me about the history of the internet",
        "Tell me an interesting fact about the ocean",
        "Tell me about emerging tech trends in 2026",
        "Tell me a bedtime story",
    ],
    "show": [
        "Show me how to use Git branches",
        "Show me examples of good UI design",
        "Show me how to meditate properly",
        "Show me the steps to deploy on Vercel",
        "Show me how to solve this math problem",
    ],
    "code": [
        "Code a simple todo app in React",
        "Code a function to reverse a string",
        "Code a REST API endpoint in Node.js",
        "Code a binary search algorithm",
        "Code a responsive navbar in CSS",
    ],
    "design": [
        "Design a database schema for a blog",
        "Design a logo concept for a coffee shop",
        "Design an API for a social media app",
        "Design a landing page layout",
        "Design a mobile app user flow",
    ],
    "plan": [
        "Plan a 7-day trip to Paris",
        "Plan my week for maximum productivity",
        "Plan a healthy diet for muscle gain",
        "Plan a product launch strategy",
        "Plan a learning roadmap for web development",
    ],
}

# Shown for an empty input, before any prefix exists
FEATURED_SUGGESTIONS: list[str] = [
    "Explain quantum computing like I'm 10 years old",
    "Write a poem about coding at midnight",
    "Help me debug this JavaScript error",
    "Give me a unique sci-fi story idea",
    "Teach me 5 useful phrases in Japanese",
    "What can I cook with chicken, rice, and vegetables?",
    "Best hidden gems to visit in Italy",
    "Create a 15-minute morning workout routine",
]

# Prompts offered before anything is typed: (text, category)
FEATURED_SUGGESTIONS: tuple[tuple[str, str], ...] = (
    ("Explain quantum computing like I'm 10 years old", "learning"),
    ("Write a poem about coding at midnight", "creative"),
    ("Help me debug this JavaScript error", "coding"),
    ("Give me a unique sci-fi story idea", "creative"),
    ("Teach me 5 useful phrases in Japanese", "learning"),
    ("What can I cook with chicken, rice, and vegetables?", "lifestyle"),
    ("Best hidden gems to visit in Italy", "travel"),
    ("Create a 15-minute morning workout routine", "health"),
    ("Recommend a mind-bending movie like Inception", "entertainment"),
    ("Design a simple game concept I could build", "gaming"),
    ("Share 5 productivity hacks for developers", "productivity"),
    ("Explain music theory basics for beginners", "learning"),
    ("Brainstorm a SaaS startup idea for 2026", "business"),
    ("Suggest a modern color palette for a tech website", "design"),
    ('Summarize "Atomic Habits" in 3 key points', "learning"),
    ("Tell me 3 mind-blowing facts about space", "trivia"),
)
