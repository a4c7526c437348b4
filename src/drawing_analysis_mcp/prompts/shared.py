"""Language-keyed building blocks shared by both task categories.

Every mapping here is keyed by language code (tr, en, ru, tk, uz).
Output-shape skeletons are language independent so the model sees the
same field names whatever language it writes in.
"""

from __future__ import annotations

import json

LANGUAGE_NAMES: dict[str, str] = {
    "tr": "Türkçe",
    "en": "English",
    "ru": "русский язык",
    "tk": "türkmen dili",
    "uz": "o'zbek tili",
}

# ── Age calibration ──────────────────────────────────────────────────────────

AGE_BAND_KEYS: tuple[str, ...] = ("2-3", "3-4", "4-6", "6-9", "9-12", "12-18")

AGE_BANDS: dict[str, dict[str, str]] = {
    "tr": {
        "2-3": "2-3 yaş: karalama dönemi; kontrolsüz ve dairesel çizgiler, renk denemeleri olağandır.",
        "3-4": "3-4 yaş: ilk kapalı şekiller ve 'kafa-bacak' insan figürleri ortaya çıkar.",
        "4-6": "4-6 yaş: şema öncesi dönem; figürler yüzer, boyutlar duygusal önem taşır, gökyüzü bir şerittir.",
        "6-9": "6-9 yaş: şematik dönem; taban çizgisi, tekrar eden semboller ve daha planlı kompozisyon görülür.",
        "9-12": "9-12 yaş: gerçekçiliğe yöneliş; detay, orantı ve perspektif denemeleri artar, öz eleştiri başlar.",
        "12-18": "12-18 yaş: ergenlik; kişisel üslup, sembolizm ve kimlik temaları öne çıkar, çizmeye isteksizlik olağandır.",
    },
    "en": {
        "2-3": "Ages 2-3: scribbling stage; uncontrolled and circular lines and colour experiments are typical.",
        "3-4": "Ages 3-4: first closed shapes and 'tadpole' human figures appear.",
        "4-6": "Ages 4-6: pre-schematic stage; floating figures, size reflects emotional importance, the sky is a strip.",
        "6-9": "Ages 6-9: schematic stage; baselines, repeated symbols and more planned compositions appear.",
        "9-12": "Ages 9-12: dawning realism; more detail, proportion and perspective attempts, growing self-criticism.",
        "12-18": "Ages 12-18: adolescence; personal style, symbolism and identity themes, reluctance to draw is common.",
    },
    "ru": {
        "2-3": "2-3 года: стадия каракулей; неуправляемые и круговые линии, эксперименты с цветом — норма.",
        "3-4": "3-4 года: появляются первые замкнутые формы и фигуры-«головоноги».",
        "4-6": "4-6 лет: досхематическая стадия; фигуры «парят», размер отражает эмоциональную значимость, небо — полоска.",
        "6-9": "6-9 лет: схематическая стадия; линия земли, повторяющиеся символы, более продуманная композиция.",
        "9-12": "9-12 лет: стремление к реализму; больше деталей, пропорций и перспективы, растёт самокритика.",
        "12-18": "12-18 лет: подростковый возраст; личный стиль, символизм и темы идентичности, нежелание рисовать — норма.",
    },
    "tk": {
        "2-3": "2-3 ýaş: çyzgylamak döwri; erkin we tegelek çyzyklar, reňk synaglary adaty ýagdaýdyr.",
        "3-4": "3-4 ýaş: ilkinji ýapyk şekiller we 'kelle-aýak' adam şekilleri peýda bolýar.",
        "4-6": "4-6 ýaş: shema öňki döwür; şekiller asylyp durýar, ululyk duýgy ähmiýetini görkezýär, asman bir zolakdyr.",
        "6-9": "6-9 ýaş: shematik döwür; ýer çyzygy, gaýtalanýan nyşanlar we has meýilleşdirilen düzüm görülýär.",
        "9-12": "9-12 ýaş: hakykata ymtylma; jikme-jiklik, gatnaşyk we perspektiwa synanyşyklary köpelýär.",
        "12-18": "12-18 ýaş: ýetginjeklik; şahsy usul, nyşanlar we şahsyýet temalary, çekmäge islegsizlik adaty ýagdaýdyr.",
    },
    "uz": {
        "2-3": "2-3 yosh: chizg'ilash davri; nazoratsiz va aylana chiziqlar, rang sinovlari odatiy holdir.",
        "3-4": "3-4 yosh: birinchi yopiq shakllar va 'bosh-oyoq' odam shakllari paydo bo'ladi.",
        "4-6": "4-6 yosh: sxemadan oldingi davr; shakllar suzib yuradi, o'lcham hissiy ahamiyatni bildiradi, osmon bir chiziq.",
        "6-9": "6-9 yosh: sxematik davr; yer chizig'i, takrorlanuvchi belgilar va rejali kompozitsiya ko'rinadi.",
        "9-12": "9-12 yosh: realizmga intilish; tafsilot, nisbat va perspektiva urinishlari ko'payadi, o'z-o'zini tanqid boshlanadi.",
        "12-18": "12-18 yosh: o'smirlik; shaxsiy uslub, ramziylik va o'zlik mavzulari, chizishni istamaslik odatiy holdir.",
    },
}

AGE_CALIBRATION_HEADER: dict[str, str] = {
    "tr": "YAŞ KALİBRASYONU (beklentilerini bu gelişim bantlarına göre ayarla; hiçbir çizimi 'geride' ya da 'gecikmiş' olarak etiketleme):",
    "en": "AGE CALIBRATION (adjust expectations to these developmental bands; never label a drawing as 'behind' or 'delayed'):",
    "ru": "КАЛИБРОВКА ПО ВОЗРАСТУ (соотноси ожидания с этими стадиями; никогда не называй рисунок «отстающим» или «задержанным»):",
    "tk": "ÝAŞ KALIBRLEMESI (garaşýan zatlaryňy şu ösüş döwürlerine görä sazla; hiç bir çyzgyny 'yzda galan' diýip atlandyrma):",
    "uz": "YOSH KALIBROVKASI (kutishlaringizni shu rivojlanish bosqichlariga moslang; hech bir rasmni 'orqada qolgan' deb atamang):",
}

CURRENT_BAND_LINE: dict[str, str] = {
    "tr": "Bu çocuk için geçerli bant: {band}.",
    "en": "Band that applies to this child: {band}.",
    "ru": "Стадия, применимая к этому ребёнку: {band}.",
    "tk": "Bu çaga degişli döwür: {band}.",
    "uz": "Ushbu bolaga tegishli bosqich: {band}.",
}

AGE_LINE: dict[str, str] = {
    "tr": "Bu çizim {age} yaşında bir çocuğa ait.",
    "en": "This drawing was made by a {age}-year-old child.",
    "ru": "Этот рисунок сделан ребёнком {age} лет.",
    "tk": "Bu çyzgy {age} ýaşly çaga tarapyndan çekildi.",
    "uz": "Bu rasmni {age} yoshli bola chizgan.",
}

UNKNOWN_AGE: dict[str, str] = {
    "tr": "Çocuğun yaşı belirtilmemiş; yorumlarını geniş bir yaş aralığına göre temkinli yap.",
    "en": "The child's age was not provided; keep interpretations cautious across a wide age range.",
    "ru": "Возраст ребёнка не указан; делай выводы осторожно, с учётом широкого возрастного диапазона.",
    "tk": "Çaganyň ýaşy görkezilmedi; netijeleri giň ýaş aralygy üçin seresaplylyk bilen çykar.",
    "uz": "Bolaning yoshi ko'rsatilmagan; xulosalarni keng yosh oralig'ini hisobga olib ehtiyotkorlik bilan chiqaring.",
}


def age_band(age: int | None) -> str | None:
    """Map an age in years to one of AGE_BAND_KEYS (None when unknown)."""
    if age is None:
        return None
    if age < 3:
        return "2-3"
    if age < 4:
        return "3-4"
    if age < 6:
        return "4-6"
    if age < 9:
        return "6-9"
    if age < 12:
        return "9-12"
    return "12-18"


# ── Request context lines ────────────────────────────────────────────────────

GENDER_LINE: dict[str, dict[str, str]] = {
    "tr": {"male": "Cinsiyet: erkek çocuk.", "female": "Cinsiyet: kız çocuk."},
    "en": {"male": "Gender: boy.", "female": "Gender: girl."},
    "ru": {"male": "Пол: мальчик.", "female": "Пол: девочка."},
    "tk": {"male": "Jynsy: oglan.", "female": "Jynsy: gyz."},
    "uz": {"male": "Jinsi: o'g'il bola.", "female": "Jinsi: qiz bola."},
}

ROLE_NOTES: dict[str, dict[str, str]] = {
    "tr": {
        "parent": "Okuyucu bir ebeveyn. Evde uygulanabilir, sıcak ve günlük dille yaz.",
        "teacher": "Okuyucu bir öğretmen. Sınıf içi gözlem ve etkinlik önerileri ver, aileyle iletişim için ipuçları ekle.",
    },
    "en": {
        "parent": "The reader is a parent. Write warmly, in everyday language, with ideas that work at home.",
        "teacher": "The reader is a teacher. Offer classroom observations and activities, plus tips for talking with the family.",
    },
    "ru": {
        "parent": "Читатель — родитель. Пиши тепло, простым языком, с идеями для дома.",
        "teacher": "Читатель — педагог. Предложи наблюдения и занятия для класса, а также советы по общению с семьёй.",
    },
    "tk": {
        "parent": "Okyjy ene-ata. Mähirli, gündelik dilde we öýde ulanyp boljak maslahatlar bilen ýaz.",
        "teacher": "Okyjy mugallym. Synp içi synlamalary we işleri hödürle, maşgala bilen gepleşmek üçin maslahat goş.",
    },
    "uz": {
        "parent": "O'quvchi — ota-ona. Iliq, kundalik tilda va uyda qo'llash mumkin bo'lgan g'oyalar bilan yozing.",
        "teacher": "O'quvchi — o'qituvchi. Sinfdagi kuzatuvlar va mashg'ulotlarni taklif qiling, oila bilan suhbat uchun maslahat qo'shing.",
    },
}

CULTURAL_CONTEXT_LINE: dict[str, str] = {
    "tr": "Kültürel bağlam (yorumlarında buna saygı göster, Batı merkezli varsayımlardan kaçın): {context}",
    "en": "Cultural context (respect it; avoid Western-centric assumptions): {context}",
    "ru": "Культурный контекст (учитывай его, избегай западноцентричных допущений): {context}",
    "tk": "Medeni gurşaw (oňa hormat goý, günbatar merkezli çaklamalardan gaça dur): {context}",
    "uz": "Madaniy kontekst (uni hurmat qiling, G'arbga yo'naltirilgan taxminlardan saqlaning): {context}",
}

FEATURES_LINE: dict[str, str] = {
    "tr": "Önceden hesaplanmış çizim sinyalleri (gürültülü olabilir, görselle çelişirse görsele güven): {features}",
    "en": "Precomputed drawing signals (may be noisy; trust the image when they disagree): {features}",
    "ru": "Предварительно вычисленные признаки рисунка (могут быть неточны; при расхождении доверяй изображению): {features}",
    "tk": "Öňünden hasaplanan çyzgy alamatlary (takyk bolmazlygy mümkin; gapma-garşylykda şekile ynan): {features}",
    "uz": "Oldindan hisoblangan rasm belgilari (noaniq bo'lishi mumkin; ziddiyat bo'lsa, tasvirga ishoning): {features}",
}

MAX_FEATURES_CHARS = 4000


def format_features(features: dict) -> str:
    """Serialise the feature map deterministically, capped in length."""
    text = json.dumps(features, ensure_ascii=False, sort_keys=True, default=str)
    if len(text) > MAX_FEATURES_CHARS:
        text = text[:MAX_FEATURES_CHARS] + "…"
    return text


# ── Images ───────────────────────────────────────────────────────────────────

DEFAULT_IMAGE_LABEL: dict[str, str] = {
    "tr": "Çizim",
    "en": "Drawing",
    "ru": "Рисунок",
    "tk": "Çyzgy",
    "uz": "Rasm",
}

NO_IMAGE_NOTE: dict[str, str] = {
    "tr": "Görsel gönderilmedi. Yalnızca verilen bağlama dayan, bunu dataQualityNotes alanında belirt ve belirsizliği yüksek tut.",
    "en": "No image was provided. Rely only on the context given, say so in dataQualityNotes and keep uncertainty high.",
    "ru": "Изображение не передано. Опирайся только на контекст, отметь это в dataQualityNotes и оценивай неопределённость как высокую.",
    "tk": "Şekil iberilmedi. Diňe berlen maglumata daýan, muny dataQualityNotes meýdançasynda belle we näbellilik derejesini ýokary sakla.",
    "uz": "Tasvir yuborilmadi. Faqat berilgan kontekstga tayaning, buni dataQualityNotes maydonida qayd eting va noaniqlikni yuqori saqlang.",
}

SINGLE_IMAGE_NOTE: dict[str, str] = {
    "tr": "Ekteki görseli dikkatle incele. Yalnızca gerçekten görünen öğeleri yaz; hayal etme, varsayımda bulunma.",
    "en": "Study the attached image carefully. Describe only what is actually visible; do not imagine or assume.",
    "ru": "Внимательно изучи приложенное изображение. Описывай только то, что действительно видно; не домысливай.",
    "tk": "Goşulan şekli üns bilen öwren. Diňe hakykatdan görünýän zatlary ýaz; oýlap tapma, çaklama.",
    "uz": "Ilova qilingan tasvirni diqqat bilan o'rganing. Faqat haqiqatan ko'rinadigan narsalarni yozing; to'qib chiqarmang.",
}

MULTI_IMAGE_HEADER: dict[str, str] = {
    "tr": "Bu istekte {count} görsel var. Her birinin önünde etiketli bir işaret bulunuyor:",
    "en": "This request contains {count} images. Each one is preceded by a labeled marker:",
    "ru": "В этом запросе {count} изображения(й). Перед каждым стоит помеченный маркер:",
    "tk": "Bu haýyşda {count} şekil bar. Her biriniň öňünde bellikli nyşan bar:",
    "uz": "Bu so'rovda {count} ta tasvir bor. Har birining oldida belgilangan marker bor:",
}

MULTI_IMAGE_ITEM: dict[str, str] = {
    "tr": "- {index}. {label} (id: {id})",
    "en": "- {index}. {label} (id: {id})",
    "ru": "- {index}. {label} (id: {id})",
    "tk": "- {index}. {label} (id: {id})",
    "uz": "- {index}. {label} (id: {id})",
}

MULTI_IMAGE_INSTRUCTIONS: dict[str, str] = {
    "tr": (
        "Önce her görseli kendi içinde yorumla, sonra birlikte değerlendir: görseller arasındaki "
        "tutarlılıkları ve farkları (ör. ev-ağaç-insan üçlüsü ya da kopya-hatırlama çifti) ayrı bir "
        "içgörüde ele al. Kanıt listelerinde görselin id değerini kullan."
    ),
    "en": (
        "Interpret each image on its own first, then jointly: treat the consistencies and differences "
        "between them (e.g. a house-tree-person triad or a copy/recall pair) in a dedicated insight. "
        "Use the image id in evidence lists."
    ),
    "ru": (
        "Сначала интерпретируй каждое изображение отдельно, затем вместе: опиши сходства и различия "
        "между ними (например, триада дом-дерево-человек или пара копия/воспроизведение) в отдельном "
        "выводе. В списках evidence указывай id изображения."
    ),
    "tk": (
        "Ilki her şekli aýratynlykda düşündir, soňra bilelikde: olaryň arasyndaky meňzeşlikleri we "
        "tapawutlary (mysal üçin öý-agaç-adam üçlügi ýa-da göçürme/ýatlama jübüti) aýratyn bir "
        "netijede beýan et. Subutnama sanawlarynda şekiliň id bahasyny ulan."
    ),
    "uz": (
        "Avval har bir tasvirni alohida, so'ng birgalikda talqin qiling: ular orasidagi o'xshashlik va "
        "farqlarni (masalan, uy-daraxt-odam uchligi yoki nusxa/eslash juftligi) alohida xulosada "
        "yoriting. Dalillar ro'yxatida tasvir id qiymatidan foydalaning."
    ),
}

IMAGE_MARKER: dict[str, str] = {
    "tr": "[Görsel {index}/{total}: {label} (id: {id})]",
    "en": "[Image {index}/{total}: {label} (id: {id})]",
    "ru": "[Изображение {index}/{total}: {label} (id: {id})]",
    "tk": "[Şekil {index}/{total}: {label} (id: {id})]",
    "uz": "[Tasvir {index}/{total}: {label} (id: {id})]",
}

# ── Output format ────────────────────────────────────────────────────────────

OUTPUT_INSTRUCTIONS: dict[str, str] = {
    "tr": (
        "YANIT FORMATI: Yalnızca aşağıdaki yapıda tek bir JSON nesnesi döndür. Alan adlarını ve sabit "
        "değerleri (ör. \"consider_consulting_a_specialist\", \"low|mid|high\") olduğu gibi bırak; tüm "
        "metin değerlerini {language_name} yaz. JSON dışında hiçbir şey ekleme."
    ),
    "en": (
        "RESPONSE FORMAT: Return a single JSON object with exactly the structure below. Keep field "
        "names and fixed values (e.g. \"consider_consulting_a_specialist\", \"low|mid|high\") as they "
        "are; write every text value in {language_name}. Add nothing outside the JSON."
    ),
    "ru": (
        "ФОРМАТ ОТВЕТА: верни один JSON-объект строго следующей структуры. Названия полей и "
        "фиксированные значения (например, \"consider_consulting_a_specialist\", \"low|mid|high\") "
        "оставь без изменений; все текстовые значения пиши: {language_name}. Ничего не добавляй вне JSON."
    ),
    "tk": (
        "JOGAP GÖRNÜŞI: Diňe aşakdaky gurluşdaky ýeke JSON obýektini gaýtar. Meýdan atlaryny we "
        "hemişelik bahalary (mysal üçin \"consider_consulting_a_specialist\", \"low|mid|high\") "
        "üýtgetme; ähli tekst bahalaryny {language_name} ýaz. JSON-dan daşary hiç zat goşma."
    ),
    "uz": (
        "JAVOB FORMATI: Faqat quyidagi tuzilishdagi bitta JSON obyektini qaytaring. Maydon nomlari va "
        "o'zgarmas qiymatlarni (masalan, \"consider_consulting_a_specialist\", \"low|mid|high\") "
        "o'zgartirmang; barcha matn qiymatlarini {language_name}da yozing. JSON tashqarisida hech narsa qo'shmang."
    ),
}

_INSIGHT_SHAPE = {
    "title": "<string>",
    "summary": "<2-4 sentences>",
    "evidence": ["<visible element or signal key>"],
    "strength": "weak|moderate|strong",
}
_META_SHAPE = {
    "confidence": "<number 0.0-1.0>",
    "uncertaintyLevel": "low|mid|high",
    "dataQualityNotes": ["<string>"],
}
_HOME_TIP_SHAPE = {"title": "<string>", "steps": ["<string>"], "why": "<string>"}
_RISK_FLAG_SHAPE = {
    "type": "self_harm|harm_others|sexual_inappropriate|violence|severe_distress|trend_regression",
    "summary": "<string>",
    "action": "consider_consulting_a_specialist",
}
_TRAUMA_SHAPE = {
    "hasTraumaticContent": "<boolean>",
    "contentTypes": ["<concern code from the taxonomy>"],
    "primaryConcern": "<concern code or null>",
    "therapeuticApproach": "<string>",
    "severity": "low|moderate|high",
    "emotionalIntensity": "low|moderate|high",
    "professionalRecommendation": "<string>",
    "immediateActions": ["<string>"],
}
_CONVERSATION_SHAPE = {
    "openingQuestions": ["<open question>"],
    "followUpQuestions": ["<string>"],
    "avoidTopics": ["<string>"],
    "supportiveResponses": ["<string>"],
}
_GUIDANCE_SHAPE = {
    "whenToSeek": ["<string>"],
    "professionalTypes": ["<string>"],
    "urgency": "monitor|soon|promptly",
}

FREE_DRAWING_OUTPUT_SHAPE = json.dumps(
    {
        "meta": _META_SHAPE,
        "insights": [_INSIGHT_SHAPE],
        "homeTips": [_HOME_TIP_SHAPE],
        "riskFlags": [_RISK_FLAG_SHAPE],
        "traumaAssessment": "null | " + json.dumps(_TRAUMA_SHAPE),
        "conversationGuide": _CONVERSATION_SHAPE,
        "professionalGuidance": "null | " + json.dumps(_GUIDANCE_SHAPE),
        "trendNote": "<string>",
    },
    indent=2,
    ensure_ascii=False,
)

INSTRUMENT_OUTPUT_SHAPE = json.dumps(
    {
        "meta": _META_SHAPE,
        "insights": [_INSIGHT_SHAPE],
        "homeTips": [_HOME_TIP_SHAPE],
        "riskFlags": [_RISK_FLAG_SHAPE],
        "traumaAssessment": "null | " + json.dumps(_TRAUMA_SHAPE),
        "conversationGuide": "null | " + json.dumps(_CONVERSATION_SHAPE),
        "professionalGuidance": "null | " + json.dumps(_GUIDANCE_SHAPE),
        "trendNote": "<string>",
    },
    indent=2,
    ensure_ascii=False,
)
