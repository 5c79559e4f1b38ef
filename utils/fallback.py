# utils/fallback.py
# Canned replies used whenever no AI provider answers.

FALLBACK_RESPONSES = {
    'lonely': (
        "My child, I understand that loneliness can feel like a heavy cloak. But hear this truth: "
        "you are never truly alone.\n\n"
        "📖 Deuteronomy 31:6 - 'Be strong and of a good courage, fear not, nor be afraid of them: for the LORD "
        "thy God, he it is that doth go with thee; he will not fail thee, nor forsake thee.'\n\n"
        "📖 Psalm 139:7-8 - 'Whither shall I go from thy spirit? or whither shall I flee from thy presence? "
        "If I ascend up into heaven, thou art there: if I make my bed in hell, behold, thou art there.'\n\n"
        "God's love surrounds you always, and His presence is with you even in the quietest moments. "
        "Reach out to Him now in prayer, beloved."
    ),
    'fear': (
        "Beloved, I see the fear in your heart. Know that God is greater than any fear you face.\n\n"
        "📖 Psalm 46:1 - 'God is our refuge and strength, a very present help in trouble.'\n\n"
        "📖 Isaiah 41:10 - 'Fear thou not; for I am with thee: be not dismayed; for I am thy God: I will "
        "strengthen thee; yea, I will help thee; yea, I will uphold thee with the right hand of my "
        "righteousness.'\n\n"
        "📖 2 Timothy 1:7 - 'For God hath not given us the spirit of fear; but of power, and of love, and of "
        "a sound mind.'\n\n"
        "Place your trust in Him, and let His perfect love cast out all fear."
    ),
    'anxious': (
        "My dear child, I hear the anxiety weighing on your mind. Let me remind you of God's care for you.\n\n"
        "📖 Philippians 4:6-7 - 'Be careful for nothing; but in every thing by prayer and supplication with "
        "thanksgiving let your requests be made known unto God. And the peace of God, which passeth all "
        "understanding, shall keep your hearts and minds through Christ Jesus.'\n\n"
        "📖 Matthew 11:28 - 'Come unto me, all ye that labour and are heavy laden, and I will give you rest.'\n\n"
        "Bring your worries to the Lord in prayer. He cares deeply for you and will give you peace that "
        "surpasses all understanding."
    ),
    'sad': (
        "My child, it is okay to feel sad. Even Jesus wept. God sees every tear you shed and holds them "
        "precious.\n\n"
        "📖 Psalm 34:18 - 'The LORD is nigh unto them that are of a broken heart; and saveth such as be of a "
        "contrite spirit.'\n\n"
        "📖 Revelation 21:4 - 'And God shall wipe away all tears from their eyes; and there shall be no more "
        "death, neither sorrow, nor crying, neither shall there be any more pain.'\n\n"
        "Let your tears flow freely before God, beloved. He sits with you in your sorrow and promises to turn "
        "your mourning into dancing."
    ),
    'hopeless': (
        "Beloved, even in the darkest of valleys, there is hope. You are not forgotten.\n\n"
        "📖 Romans 15:13 - 'Now the God of hope fill you with all joy and peace in believing, that ye may "
        "abound in hope, through the power of the Holy Ghost.'\n\n"
        "📖 Lamentations 3:22-23 - 'It is of the LORD's mercies that we are not consumed, because his "
        "compassions fail not. They are new every morning: great is thy faithfulness.'\n\n"
        "His mercies are new every morning, so tomorrow holds fresh grace and possibility that you cannot "
        "yet see. Hold on, dear one."
    ),
    'generic': (
        "My child, thank you for sharing your heart with me. Whatever you are carrying right now, God sees "
        "it and cares deeply for you.\n\n"
        "📖 Romans 8:38-39 - 'For I am persuaded, that neither death, nor life, nor angels, nor "
        "principalities, nor powers, nor things present, nor things to come, nor height, nor depth, nor any "
        "other creature, shall be able to separate us from the love of God, which is in Christ Jesus our "
        "Lord.'\n\n"
        "📖 Psalm 55:22 - 'Cast thy burden upon the LORD, and he shall sustain thee: he shall never suffer "
        "the righteous to be moved.'\n\n"
        "You are precious in His sight, beloved, and He has wonderful plans for your life. Bring whatever is "
        "on your heart to Him in prayer today."
    ),
}

# Checked in order; the first group with a matching keyword wins
KEYWORD_MAP = [
    (('lonely', 'alone', 'isolated', 'abandoned', 'left out'), 'lonely'),
    (('fear', 'scared', 'afraid', 'frightened', 'terrified', 'phobia'), 'fear'),
    (('anxious', 'anxiety', 'worried', 'worry', 'stress', 'stressed', 'nervous'), 'anxious'),
    (('sad', 'sadness', 'cry', 'crying', 'tears', 'sorrowful', 'sorrow', 'grief', 'grieving'), 'sad'),
    (('hopeless', 'hopelessness', 'no hope', 'give up', 'giving up', 'despair', 'desperate'), 'hopeless'),
    (('angry', 'anger', 'furious', 'mad', 'rage', 'frustrated'), 'generic'),
    (('lost', 'confused', 'direction', 'purpose', 'meaning', 'identity'), 'generic'),
    (('depressed', 'depression', 'empty', 'numb', 'dark', 'darkness'), 'generic'),
    (('love', 'loved', 'unloved', 'worth', 'worthy', 'valuable'), 'generic'),
    (('strength', 'tired', 'exhausted', 'weak', 'weary', "can't go on"), 'generic'),
]


def classify_message(user_message):
    """Name of the canned response that fits the message ('generic' if nothing matches)."""
    lower_message = (user_message or '').lower()
    for keywords, response_type in KEYWORD_MAP:
        if any(k in lower_message for k in keywords):
            return response_type
    return 'generic'


def get_fallback_response(user_message):
    return FALLBACK_RESPONSES[classify_message(user_message)]
