"""
Six factors questionnaire content.

Questions are served in list order; a question's id is its position.
"""

SIXFACTORS_QUESTIONS = [
    # Honesty-Humility
    {
        "factor": "honesty_humility",
        "label": {
            "en": "I wouldn't use flattery to get a raise or promotion at work, even if I thought it would succeed.",
            "fr": "Je n'utiliserais pas la flatterie pour obtenir une augmentation ou une promotion, même si je pensais que cela marcherait.",
        },
    },
    {
        "factor": "honesty_humility",
        "label": {
            "en": "I would never accept a bribe, even if it were very large.",
            "fr": "Je n'accepterais jamais un pot-de-vin, même très important.",
        },
    },
    {
        "factor": "honesty_humility",
        "label": {
            "en": "Having a lot of money is not especially important to me.",
            "fr": "Avoir beaucoup d'argent n'est pas particulièrement important pour moi.",
        },
    },
    {
        "factor": "honesty_humility",
        "label": {
            "en": "I think that I am entitled to more respect than the average person is.",
            "fr": "Je pense que je mérite plus de respect que la moyenne des gens.",
        },
    },
    # Emotionality
    {
        "factor": "emotionality",
        "label": {
            "en": "I would feel afraid if I had to travel in bad weather conditions.",
            "fr": "J'aurais peur de devoir voyager par mauvais temps.",
        },
    },
    {
        "factor": "emotionality",
        "label": {
            "en": "I sometimes can't help worrying about little things.",
            "fr": "Il m'arrive de ne pas pouvoir m'empêcher de m'inquiéter pour des petites choses.",
        },
    },
    {
        "factor": "emotionality",
        "label": {
            "en": "When I suffer from a painful experience, I need someone to make me feel comfortable.",
            "fr": "Quand je vis une expérience douloureuse, j'ai besoin que quelqu'un me réconforte.",
        },
    },
    {
        "factor": "emotionality",
        "label": {
            "en": "I feel strong emotions when someone close to me is going away for a long time.",
            "fr": "Je ressens de fortes émotions quand un proche s'en va pour longtemps.",
        },
    },
    # Extraversion
    {
        "factor": "extraversion",
        "label": {
            "en": "I feel reasonably satisfied with myself overall.",
            "fr": "Dans l'ensemble, je suis plutôt satisfait de moi-même.",
        },
    },
    {
        "factor": "extraversion",
        "label": {
            "en": "I rarely express my opinions in group meetings.",
            "fr": "J'exprime rarement mes opinions lors des réunions de groupe.",
        },
    },
    {
        "factor": "extraversion",
        "label": {
            "en": "I prefer jobs that involve active social interaction to those that involve working alone.",
            "fr": "Je préfère les emplois avec beaucoup d'interactions sociales à ceux où l'on travaille seul.",
        },
    },
    {
        "factor": "extraversion",
        "label": {
            "en": "On most days, I feel cheerful and optimistic.",
            "fr": "La plupart du temps, je me sens joyeux et optimiste.",
        },
    },
    # Agreeableness
    {
        "factor": "agreeableness",
        "label": {
            "en": "I rarely hold a grudge, even against people who have badly wronged me.",
            "fr": "Je garde rarement rancune, même envers ceux qui m'ont fait du tort.",
        },
    },
    {
        "factor": "agreeableness",
        "label": {
            "en": "People sometimes tell me that I am too critical of others.",
            "fr": "On me dit parfois que je suis trop critique envers les autres.",
        },
    },
    {
        "factor": "agreeableness",
        "label": {
            "en": "I generally accept people's faults without complaining about them.",
            "fr": "J'accepte généralement les défauts des autres sans m'en plaindre.",
        },
    },
    {
        "factor": "agreeableness",
        "label": {
            "en": "Most people tend to get angry more quickly than I do.",
            "fr": "La plupart des gens se mettent en colère plus vite que moi.",
        },
    },
    # Conscientiousness
    {
        "factor": "conscientiousness",
        "label": {
            "en": "I plan ahead and organize things, to avoid scrambling at the last minute.",
            "fr": "Je planifie et m'organise pour éviter la précipitation de dernière minute.",
        },
    },
    {
        "factor": "conscientiousness",
        "label": {
            "en": "I often push myself very hard when trying to achieve a goal.",
            "fr": "Je me pousse souvent très fort pour atteindre un objectif.",
        },
    },
    {
        "factor": "conscientiousness",
        "label": {
            "en": "When working on something, I don't pay much attention to small details.",
            "fr": "Quand je travaille sur quelque chose, je ne prête pas beaucoup d'attention aux détails.",
        },
    },
    {
        "factor": "conscientiousness",
        "label": {
            "en": "I make decisions based on the feeling of the moment rather than on careful thought.",
            "fr": "Je prends mes décisions sur le moment plutôt qu'après mûre réflexion.",
        },
    },
    # Openness to Experience
    {
        "factor": "openness",
        "label": {
            "en": "I would be quite bored by a visit to an art gallery.",
            "fr": "Je m'ennuierais beaucoup en visitant une galerie d'art.",
        },
    },
    {
        "factor": "openness",
        "label": {
            "en": "I'm interested in learning about the history and politics of other countries.",
            "fr": "J'aime découvrir l'histoire et la politique d'autres pays.",
        },
    },
    {
        "factor": "openness",
        "label": {
            "en": "I would enjoy creating a work of art, such as a novel, a song, or a painting.",
            "fr": "J'aimerais créer une œuvre d'art, comme un roman, une chanson ou un tableau.",
        },
    },
    {
        "factor": "openness",
        "label": {
            "en": "I like people who have unconventional views.",
            "fr": "J'aime les gens qui ont des opinions non conventionnelles.",
        },
    },
]

# Answer phrases as sent back by the chat quick replies.
SIXFACTORS_ANSWER_CODES = {
    "en": {
        "I agree": 3,
        "I don't know": 0,
        "I disagree": -3,
    },
    "fr": {
        "Je suis d'accord": 3,
        "Je ne sais pas": 0,
        "Je ne suis pas d'accord": -3,
    },
}
