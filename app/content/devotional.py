"""
Devotional plan content.

One entry per day of the 30-day plan.  Each day pairs a KJV passage
with guidance, a reflection prompt for the journal and a small action
to carry into the day.
"""

from typing import Optional

from app.schemas.devotional import DevotionalDay

# (title, scripture, guidance, reflection, action)
_DAYS = [
    (
        "A New Beginning",
        "Therefore if any man be in Christ, he is a new creature: old things are passed away; "
        "behold, all things are become new. (2 Corinthians 5:17)",
        "Every journey with God starts with his invitation, not our effort. Begin these thirty days "
        "by receiving the newness he offers.",
        "What old things are you ready to leave behind as you begin?",
        "Write down one hope you have for the next thirty days.",
    ),
    (
        "The Lord Is My Shepherd",
        "The LORD is my shepherd; I shall not want. He maketh me to lie down in green pastures: "
        "he leadeth me beside the still waters. (Psalm 23:1-2)",
        "A shepherd leads, provides and protects. Rest today in the care of one who knows the way.",
        "Where do you need to be led beside still waters right now?",
        "Set aside ten quiet minutes with no screen and no agenda.",
    ),
    (
        "Seek First",
        "But seek ye first the kingdom of God, and his righteousness; and all these things shall be "
        "added unto you. (Matthew 6:33)",
        "Priorities show what we trust. Placing God first is not losing time but ordering it.",
        "What competes most for first place in your day?",
        "Begin tomorrow with prayer before you reach for your phone.",
    ),
    (
        "Trust and Lean Not",
        "Trust in the LORD with all thine heart; and lean not unto thine own understanding. "
        "In all thy ways acknowledge him, and he shall direct thy paths. (Proverbs 3:5-6)",
        "Trust is tested where our understanding runs out. Bring him the decisions you cannot see through.",
        "Which decision are you trying to carry on your own understanding?",
        "Name that decision aloud in prayer and ask for direction.",
    ),
    (
        "Be Still",
        "Be still, and know that I am God: I will be exalted among the heathen, I will be exalted "
        "in the earth. (Psalm 46:10)",
        "Stillness is not emptiness. It is making room to remember who God is.",
        "What noise makes it hardest for you to be still?",
        "Sit in silence for five minutes and repeat the verse slowly.",
    ),
    (
        "Strength Renewed",
        "But they that wait upon the LORD shall renew their strength; they shall mount up with wings "
        "as eagles; they shall run, and not be weary; and they shall walk, and not faint. (Isaiah 40:31)",
        "Waiting on God is an active hope. His strength is given to those who stop relying on their own.",
        "Where are you weary, and what would waiting on the Lord look like there?",
        "Take a walk and pray for renewed strength as you go.",
    ),
    (
        "Love One Another",
        "A new commandment I give unto you, That ye love one another; as I have loved you, that ye "
        "also love one another. (John 13:34)",
        "The measure of our love is the way Christ has loved us: patiently, sacrificially, first.",
        "Who is hardest for you to love this week?",
        "Do one unexpected kindness for that person.",
    ),
    (
        "Rest for the Weary",
        "Come unto me, all ye that labour and are heavy laden, and I will give you rest. "
        "(Matthew 11:28)",
        "Jesus does not ask the weary to try harder. He asks them to come.",
        "What burden have you been carrying that you can hand to him today?",
        "Write the burden down, pray over it, and set the paper aside.",
    ),
    (
        "A Clean Heart",
        "Create in me a clean heart, O God; and renew a right spirit within me. (Psalm 51:10)",
        "Confession is not a weight but a release. God delights to make clean what we bring into the light.",
        "Is there anything you have been keeping in the dark?",
        "Pray Psalm 51:1-12 as your own prayer.",
    ),
    (
        "Peace Beyond Understanding",
        "Be careful for nothing; but in every thing by prayer and supplication with thanksgiving let "
        "your requests be made known unto God. And the peace of God, which passeth all understanding, "
        "shall keep your hearts and minds through Christ Jesus. (Philippians 4:6-7)",
        "Anxiety turned into prayer becomes an opening for peace. Thanksgiving keeps our eyes on his faithfulness.",
        "What are you anxious about, and what can you thank God for in the middle of it?",
        "List three worries and, beside each, one thing you are thankful for.",
    ),
    (
        "The Word as a Lamp",
        "Thy word is a lamp unto my feet, and a light unto my path. (Psalm 119:105)",
        "A lamp shows the next step, not the whole road. Scripture is enough light for today.",
        "What next step is God's word lighting for you?",
        "Memorize today's verse.",
    ),
    (
        "Abide in the Vine",
        "I am the vine, ye are the branches: He that abideth in me, and I in him, the same bringeth "
        "forth much fruit: for without me ye can do nothing. (John 15:5)",
        "Fruit grows from connection, not strain. Staying close to Christ is the work.",
        "Where have you been striving instead of abiding?",
        "Pause three times today to turn your attention back to him.",
    ),
    (
        "Fearfully and Wonderfully Made",
        "I will praise thee; for I am fearfully and wonderfully made: marvellous are thy works; and "
        "that my soul knoweth right well. (Psalm 139:14)",
        "Your worth was settled by the one who made you. Let his view of you shape your own.",
        "What would change if you believed this verse about yourself?",
        "Thank God for one thing about how he made you.",
    ),
    (
        "Grace Sufficient",
        "And he said unto me, My grace is sufficient for thee: for my strength is made perfect in "
        "weakness. (2 Corinthians 12:9)",
        "Weakness is not the end of the story. It is where his strength shows most clearly.",
        "Which weakness are you most tempted to hide?",
        "Share a struggle with a trusted friend and ask them to pray.",
    ),
    (
        "Forgiven to Forgive",
        "And be ye kind one to another, tenderhearted, forgiving one another, even as God for "
        "Christ's sake hath forgiven you. (Ephesians 4:32)",
        "Forgiveness flows from having been forgiven. We release others because we have been released.",
        "Is there someone you need to forgive?",
        "Pray a blessing over someone who has hurt you.",
    ),
    (
        "Halfway: Great Is Thy Faithfulness",
        "It is of the LORD's mercies that we are not consumed, because his compassions fail not. "
        "They are new every morning: great is thy faithfulness. (Lamentations 3:22-23)",
        "You are halfway through. Look back and notice his faithfulness in the days behind you.",
        "Where have you seen God's mercy in the last fifteen days?",
        "Reread your journal entries so far and underline one moment of grace.",
    ),
    (
        "Walking by Faith",
        "For we walk by faith, not by sight. (2 Corinthians 5:7)",
        "Faith moves forward before the outcome is visible, trusting the character of God.",
        "What are you waiting to see before you take a step?",
        "Take one small step of obedience you have been postponing.",
    ),
    (
        "The Fruit of the Spirit",
        "But the fruit of the Spirit is love, joy, peace, longsuffering, gentleness, goodness, faith, "
        "Meekness, temperance: against such there is no law. (Galatians 5:22-23)",
        "These are not achievements but evidence of the Spirit's work in us over time.",
        "Which fruit do you most long to see grow in your life?",
        "Ask the Holy Spirit to grow that fruit in you today.",
    ),
    (
        "Humble Yourselves",
        "Humble yourselves therefore under the mighty hand of God, that he may exalt you in due time: "
        "Casting all your care upon him; for he careth for you. (1 Peter 5:6-7)",
        "Humility is trusting God with our reputation and our cares alike.",
        "Where does pride or worry keep you from casting your cares on him?",
        "Serve someone today without mentioning it to anyone.",
    ),
    (
        "All Things Work Together",
        "And we know that all things work together for good to them that love God, to them who are "
        "the called according to his purpose. (Romans 8:28)",
        "God's purpose is larger than any single circumstance. He weaves even hard things toward good.",
        "What hard circumstance do you need to entrust to his purpose?",
        "Write a prayer of trust about that circumstance.",
    ),
    (
        "Renewed Minds",
        "And be not conformed to this world: but be ye transformed by the renewing of your mind, "
        "that ye may prove what is that good, and acceptable, and perfect, will of God. (Romans 12:2)",
        "What we dwell on shapes who we become. Transformation begins in the mind.",
        "What thoughts have been shaping you most this week?",
        "Replace one habit of consumption with time in scripture.",
    ),
    (
        "The Armour of God",
        "Put on the whole armour of God, that ye may be able to stand against the wiles of the devil. "
        "(Ephesians 6:11)",
        "We do not stand in our own strength. God provides everything needed to stand firm.",
        "Where are you most vulnerable to discouragement or temptation?",
        "Read Ephesians 6:10-18 and pray through each piece of the armour.",
    ),
    (
        "Joy in the Lord",
        "Rejoice in the Lord alway: and again I say, Rejoice. (Philippians 4:4)",
        "Joy rooted in the Lord does not depend on circumstances. It is a choice to remember him.",
        "What steals your joy most easily?",
        "Sing or listen to a hymn of praise.",
    ),
    (
        "Ask, Seek, Knock",
        "Ask, and it shall be given you; seek, and ye shall find; knock, and it shall be opened unto you. "
        "(Matthew 7:7)",
        "God invites persistent prayer. He is a Father who loves to give good gifts.",
        "What have you stopped asking God for?",
        "Bring that request to him again today.",
    ),
    (
        "Light of the World",
        "Let your light so shine before men, that they may see your good works, and glorify your "
        "Father which is in heaven. (Matthew 5:16)",
        "Our good works point beyond us. Let your life make his goodness visible.",
        "Where could your light shine more brightly this week?",
        "Encourage someone with a handwritten note.",
    ),
    (
        "Nothing Can Separate",
        "For I am persuaded, that neither death, nor life, nor angels, nor principalities, nor powers, "
        "nor things present, nor things to come, Nor height, nor depth, nor any other creature, shall "
        "be able to separate us from the love of God, which is in Christ Jesus our Lord. (Romans 8:38-39)",
        "His love holds you more firmly than you hold him.",
        "What fear does this promise speak to in you?",
        "Read the verse aloud, inserting your own name.",
    ),
    (
        "Whatsoever Things",
        "Finally, brethren, whatsoever things are true, whatsoever things are honest, whatsoever things "
        "are just, whatsoever things are pure, whatsoever things are lovely, whatsoever things are of "
        "good report; if there be any virtue, and if there be any praise, think on these things. "
        "(Philippians 4:8)",
        "Guarding our thoughts is an act of worship and a path to peace.",
        "Which of these 'whatsoever things' do you need to think on more?",
        "Spend your commute or a break dwelling on something lovely.",
    ),
    (
        "Serving Others",
        "For even the Son of man came not to be ministered unto, but to minister, and to give his life "
        "a ransom for many. (Mark 10:45)",
        "Greatness in the kingdom looks like service. Jesus leads the way.",
        "Who in your life needs to be served rather than managed?",
        "Offer practical help to someone without being asked.",
    ),
    (
        "He Who Began a Good Work",
        "Being confident of this very thing, that he which hath begun a good work in you will perform "
        "it until the day of Jesus Christ. (Philippians 1:6)",
        "God finishes what he starts. Your growth is his project as much as yours.",
        "What good work have you seen God begin in you during this plan?",
        "Write a thank-you prayer for the growth of the last four weeks.",
    ),
    (
        "Go Forward",
        "Now unto him that is able to do exceeding abundantly above all that we ask or think, according "
        "to the power that worketh in us, Unto him be glory in the church by Christ Jesus throughout all "
        "ages, world without end. Amen. (Ephesians 3:20-21)",
        "The thirty days end, but the walk continues. Go forward expecting more than you can ask or imagine.",
        "What rhythm from these thirty days will you keep?",
        "Choose one daily practice to continue and tell someone about it.",
    ),
]

DEVOTIONAL_DAYS = [
    DevotionalDay(day_number=number, title=title, scripture=scripture, guidance=guidance,
                  reflection=reflection, action=action)
    for number, (title, scripture, guidance, reflection, action) in enumerate(_DAYS, start=1)
]


def get_devotional_day(day: int) -> Optional[DevotionalDay]:
    """Return the content for *day* (1-based), or ``None`` outside the plan."""
    if 1 <= day <= len(DEVOTIONAL_DAYS):
        return DEVOTIONAL_DAYS[day - 1]
    return None
