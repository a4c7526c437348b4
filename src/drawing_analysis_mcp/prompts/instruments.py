"""Standardized-instrument templates: clinical but non-diagnostic.

Each canonical instrument has one interpretive lens per language. Turkish
aliases (Aile, Kaktus, ...) are resolved to their canonical code before
lookup, so they never appear here.

Template placeholders:

- SYSTEM: ``{language_name}``
- TASK: ``{test_name}``, ``{context}``, ``{lens}``, ``{taxonomy}``
"""

from __future__ import annotations

INSTRUMENTS: tuple[str, ...] = (
    "DAP", "HTP", "Family", "Cactus", "Tree", "Garden",
    "BenderGestalt2", "ReyOsterrieth", "Luscher",
)

SYSTEM: dict[str, str] = {
    "tr": (
        "Sen projektif çizim testleri konusunda deneyimli bir çocuk psikoloğusun. Standart bir testi "
        "klinik titizlikle ama tanı koymadan yorumlarsın.\n"
        "Kurallar:\n"
        "- Bulguları her zaman olasılık diliyle yaz; tek bir işaretten kesin sonuç çıkarma.\n"
        "- Çocuğu hiçbir zaman 'geride' ya da 'anormal' olarak etiketleme.\n"
        "- Aşağıdaki kaygı taksonomisinden bir içerik tespit edersen traumaAssessment alanını doldur; "
        "yoksa traumaAssessment null olsun.\n"
        "- Risk işaretlerini riskFlags içinde belirt; eylem her zaman \"consider_consulting_a_specialist\".\n"
        "- Tüm metinleri {language_name} yaz ve yalnızca JSON döndür."
    ),
    "en": (
        "You are a child psychologist experienced with projective drawing tests. You interpret a "
        "standardized test with clinical rigour but never diagnose.\n"
        "Rules:\n"
        "- Always phrase findings probabilistically; never conclude from a single sign.\n"
        "- Never label the child as 'behind' or 'abnormal'.\n"
        "- If you detect content from the concern taxonomy below, fill traumaAssessment; "
        "otherwise traumaAssessment must be null.\n"
        "- Record safety concerns in riskFlags; the action is always \"consider_consulting_a_specialist\".\n"
        "- Write every text in {language_name} and return JSON only."
    ),
    "ru": (
        "Ты — детский психолог с опытом работы с проективными рисуночными тестами. Ты интерпретируешь "
        "стандартный тест с клинической точностью, но без постановки диагноза.\n"
        "Правила:\n"
        "- Формулируй выводы вероятностно; не делай заключений по одному признаку.\n"
        "- Никогда не называй ребёнка «отстающим» или «ненормальным».\n"
        "- Если обнаружено содержание из таксономии ниже, заполни traumaAssessment; "
        "иначе traumaAssessment должен быть null.\n"
        "- Отмечай риски в riskFlags; действие всегда \"consider_consulting_a_specialist\".\n"
        "- Пиши все тексты: {language_name}; возвращай только JSON."
    ),
    "tk": (
        "Sen proýektiw çyzgy synaglary boýunça tejribeli çaga psihology. Standart synagy kliniki "
        "takyklyk bilen, emma diagnoz goýman düşündirýärsiň.\n"
        "Düzgünler:\n"
        "- Netijeleri hemişe ähtimallyk dilinde ýaz; ýeke alamatdan anyk netije çykarma.\n"
        "- Çagany hiç haçan 'yzda galan' ýa-da 'adaty däl' diýip atlandyrma.\n"
        "- Aşakdaky alada taksonomiýasyndan mazmun tapsaň traumaAssessment meýdançasyny doldur; "
        "ýogsa traumaAssessment null bolsun.\n"
        "- Howp alamatlaryny riskFlags içinde belle; hereket hemişe \"consider_consulting_a_specialist\".\n"
        "- Ähli tekstleri {language_name} ýaz we diňe JSON gaýtar."
    ),
    "uz": (
        "Siz proyektiv rasm testlari bo'yicha tajribali bolalar psixologisiz. Standart testni klinik "
        "aniqlik bilan, lekin tashxis qo'ymasdan talqin qilasiz.\n"
        "Qoidalar:\n"
        "- Xulosalarni doimo ehtimollik tilida yozing; bitta belgidan qat'iy xulosa chiqarmang.\n"
        "- Bolani hech qachon 'orqada qolgan' yoki 'g'ayritabiiy' deb atamang.\n"
        "- Quyidagi tashvish taksonomiyasidan mazmun aniqlansa traumaAssessment maydonini to'ldiring; "
        "aks holda traumaAssessment null bo'lsin.\n"
        "- Xavf belgilarini riskFlags ichida qayd eting; harakat doimo \"consider_consulting_a_specialist\".\n"
        "- Barcha matnlarni {language_name}da yozing va faqat JSON qaytaring."
    ),
}

TASK: dict[str, str] = {
    "tr": (
        "GÖREV: {test_name} testini değerlendir.\n"
        "{context}\n\n"
        "YORUM ÇERÇEVESİ:\n{lens}\n\n"
        "KAYGI TAKSONOMİSİ (traumaAssessment.contentTypes ve primaryConcern için yalnızca bu kodları kullan):\n"
        "{taxonomy}\n\n"
        "En az üç içgörü üret; her birinin evidence listesi görünen öğelere dayansın. "
        "homeTips için 2-3 uygulanabilir öneri ver. Ciddi bir bulgu varsa professionalGuidance doldur."
    ),
    "en": (
        "TASK: Assess the {test_name} test.\n"
        "{context}\n\n"
        "INTERPRETIVE FRAME:\n{lens}\n\n"
        "CONCERN TAXONOMY (use only these codes for traumaAssessment.contentTypes and primaryConcern):\n"
        "{taxonomy}\n\n"
        "Produce at least three insights, each with evidence grounded in visible elements. "
        "Give 2-3 practical homeTips. Fill professionalGuidance when a finding is serious."
    ),
    "ru": (
        "ЗАДАЧА: оцени тест «{test_name}».\n"
        "{context}\n\n"
        "РАМКА ИНТЕРПРЕТАЦИИ:\n{lens}\n\n"
        "ТАКСОНОМИЯ ТРЕВОЖНЫХ ТЕМ (для traumaAssessment.contentTypes и primaryConcern используй только эти коды):\n"
        "{taxonomy}\n\n"
        "Сформулируй не менее трёх выводов, каждый с evidence, основанным на видимых элементах. "
        "Дай 2-3 практических homeTips. Заполни professionalGuidance при серьёзной находке."
    ),
    "tk": (
        "WEZIPE: {test_name} synagyny baha ber.\n"
        "{context}\n\n"
        "DÜŞÜNDIRIŞ ÇARÇUWASY:\n{lens}\n\n"
        "ALADA TAKSONOMIÝASY (traumaAssessment.contentTypes we primaryConcern üçin diňe şu kodlary ulan):\n"
        "{taxonomy}\n\n"
        "Azyndan üç netije çykar, her biriniň evidence sanawy görünýän böleklere esaslansyn. "
        "homeTips üçin 2-3 amaly maslahat ber. Çynlakaý tapyndy bar bolsa professionalGuidance doldur."
    ),
    "uz": (
        "VAZIFA: {test_name} testini baholang.\n"
        "{context}\n\n"
        "TALQIN DOIRASI:\n{lens}\n\n"
        "TASHVISH TAKSONOMIYASI (traumaAssessment.contentTypes va primaryConcern uchun faqat shu kodlardan foydalaning):\n"
        "{taxonomy}\n\n"
        "Kamida uchta xulosa chiqaring, har birining evidence ro'yxati ko'rinadigan elementlarga asoslansin. "
        "homeTips uchun 2-3 amaliy maslahat bering. Jiddiy topilma bo'lsa professionalGuidance to'ldiring."
    ),
}

TEST_NAMES: dict[str, dict[str, str]] = {
    "tr": {
        "DAP": "İnsan Çiz (DAP)", "HTP": "Ev-Ağaç-İnsan (HTP)", "Family": "Aile Çiz",
        "Cactus": "Kaktüs Çiz", "Tree": "Ağaç Çiz", "Garden": "Bahçe Çiz",
        "BenderGestalt2": "Bender-Gestalt II", "ReyOsterrieth": "Rey-Osterrieth Karmaşık Figür",
        "Luscher": "Lüscher Renk Testi",
    },
    "en": {
        "DAP": "Draw-A-Person (DAP)", "HTP": "House-Tree-Person (HTP)", "Family": "Kinetic Family Drawing",
        "Cactus": "Cactus Drawing", "Tree": "Tree Drawing", "Garden": "Garden Drawing",
        "BenderGestalt2": "Bender-Gestalt II", "ReyOsterrieth": "Rey-Osterrieth Complex Figure",
        "Luscher": "Lüscher Colour Test",
    },
    "ru": {
        "DAP": "Рисунок человека (DAP)", "HTP": "Дом-Дерево-Человек (HTP)", "Family": "Рисунок семьи",
        "Cactus": "Кактус", "Tree": "Рисунок дерева", "Garden": "Рисунок сада",
        "BenderGestalt2": "Тест Бендер-Гештальт II", "ReyOsterrieth": "Сложная фигура Рея-Остеррита",
        "Luscher": "Цветовой тест Люшера",
    },
    "tk": {
        "DAP": "Adam çek (DAP)", "HTP": "Öý-Agaç-Adam (HTP)", "Family": "Maşgala çek",
        "Cactus": "Kaktus çek", "Tree": "Agaç çek", "Garden": "Bag çek",
        "BenderGestalt2": "Bender-Gestalt II", "ReyOsterrieth": "Reý-Osterrit çylşyrymly şekil",
        "Luscher": "Lýuşeriň reňk synagy",
    },
    "uz": {
        "DAP": "Odam chizing (DAP)", "HTP": "Uy-Daraxt-Odam (HTP)", "Family": "Oila rasmi",
        "Cactus": "Kaktus rasmi", "Tree": "Daraxt rasmi", "Garden": "Bog' rasmi",
        "BenderGestalt2": "Bender-Gestalt II", "ReyOsterrieth": "Rey-Osterrit murakkab shakli",
        "Luscher": "Lyusher rang testi",
    },
}

LENSES: dict[str, dict[str, str]] = {
    "tr": {
        "DAP": "Figür oranları, baş-gövde dengesi, eller ve yüz ifadesi, sayfadaki konum ve boyut; "
               "büyük figür özgüvene, çok küçük figür geri çekilmeye işaret edebilir.",
        "HTP": "Ev aile ortamını, ağaç iç dünyayı ve büyümeyi, insan benlik algısını temsil eder. "
               "Kapı-pencere açıklığı, kök-gövde-taç dengesi ve figürün tamlığını birlikte değerlendir.",
        "Family": "Figürlerin sırası, büyüklüğü, birbirine uzaklığı, çocuğun kendini nereye koyduğu ve "
                  "eksik bırakılan aile üyeleri ilişki dinamiklerini düşündürebilir.",
        "Cactus": "Dikenlerin sayısı ve yönü savunmacılığı, saksı ve toprak güven ihtiyacını, çiçekler "
                  "olumlu duyguları, kaktüsün büyüklüğü kendini ortaya koyma biçimini yansıtabilir.",
        "Tree": "Gövde, kökler ve taç arasındaki denge; kırık dallar, oyuklar, meyveler ve toprak çizgisi "
                "iç kaynakları, köklenmeyi ve geleceğe yönelimi düşündürebilir.",
        "Garden": "Bahçenin düzeni, bitki çeşitliliği, sınırlar ve çitler, büyüme ile bakım temaları "
                  "çocuğun çevresini ve kendini besleme biçimini yansıtabilir.",
        "BenderGestalt2": "Görsel-motor bütünleştirmeyi değerlendir: şekil bozulması, döndürme, "
                          "bütünleştirme hataları, perseverasyon ve sayfa düzeni. Duygusal yorumu sınırlı tut.",
        "ReyOsterrieth": "Kopyalama ve hatırlama aşamalarında planlama stratejisi, ayrıntıların korunması, "
                         "bütün-parça ilişkisi ve organizasyonu değerlendir; iki aşamayı karşılaştır.",
        "Luscher": "Renk tercih sırası ve reddedilen renkler üzerinden o anki duygusal durumu "
                   "temkinle yorumla; görsel olmayabilir, bağlam ve sinyallere dayan.",
    },
    "en": {
        "DAP": "Figure proportions, head-body balance, hands and facial expression, position and size "
               "on the page; a large figure may suggest confidence, a tiny one withdrawal.",
        "HTP": "The house represents the family setting, the tree inner life and growth, the person "
               "self-perception. Weigh door and window openness, root-trunk-canopy balance and figure completeness together.",
        "Family": "Order, size and distance between figures, where the child places themself and "
                  "which members are missing may suggest relationship dynamics.",
        "Cactus": "Number and direction of spines may reflect defensiveness, the pot and soil a need "
                  "for security, flowers positive feelings, overall size how the child asserts themself.",
        "Tree": "Trunk/root/canopy balance; broken branches, hollows, fruit and the ground line may "
                "suggest inner resources, rootedness and orientation toward the future.",
        "Garden": "Layout, plant variety, borders and fences, and themes of growth and care may reflect "
                  "how the child sees their surroundings and nurtures themself.",
        "BenderGestalt2": "Assess visual-motor integration: distortion, rotation, integration errors, "
                          "perseveration and page organisation. Keep emotional interpretation limited.",
        "ReyOsterrieth": "Assess planning strategy, preservation of detail, whole-part relations and "
                         "organisation in the copy and recall phases; compare the two phases.",
        "Luscher": "Cautiously interpret the current emotional state from colour preference order and "
                   "rejected colours; there may be no image, so rely on context and signals.",
    },
    "ru": {
        "DAP": "Пропорции фигуры, баланс головы и тела, руки и выражение лица, положение и размер на "
               "листе; крупная фигура может говорить об уверенности, очень маленькая — о замкнутости.",
        "HTP": "Дом отражает семейную среду, дерево — внутренний мир и рост, человек — самовосприятие. "
               "Оценивай вместе открытость дверей и окон, баланс корней, ствола и кроны и целостность фигуры.",
        "Family": "Порядок, размер и расстояние между фигурами, место, где ребёнок изобразил себя, и "
                  "отсутствующие члены семьи могут указывать на динамику отношений.",
        "Cactus": "Количество и направление колючек может отражать защитность, горшок и почва — "
                  "потребность в безопасности, цветы — позитивные чувства, размер — самоутверждение.",
        "Tree": "Баланс ствола, корней и кроны; сломанные ветви, дупла, плоды и линия земли могут "
                "говорить о внутренних ресурсах, укоренённости и направленности в будущее.",
        "Garden": "Планировка, разнообразие растений, границы и заборы, темы роста и заботы могут "
                  "отражать восприятие окружения и способы заботы о себе.",
        "BenderGestalt2": "Оцени зрительно-моторную интеграцию: искажения, повороты, ошибки интеграции, "
                          "персеверации и организацию листа. Эмоциональную интерпретацию ограничь.",
        "ReyOsterrieth": "Оцени стратегию планирования, сохранность деталей, соотношение целого и частей "
                         "и организацию при копировании и воспроизведении; сравни обе фазы.",
        "Luscher": "Осторожно интерпретируй текущее эмоциональное состояние по порядку предпочтения "
                   "цветов и отвергнутым цветам; изображения может не быть, опирайся на контекст и признаки.",
    },
    "tk": {
        "DAP": "Şekiliň gatnaşyklary, kelle-beden deňagramlylygy, eller we ýüz keşbi, sahypadaky ýeri we "
               "ululygy; uly şekil ynama, örän kiçi şekil içine çekilmä işaret edip biler.",
        "HTP": "Öý maşgala gurşawyny, agaç içki dünýäni we ösüşi, adam özüňi duýuşy aňladýar. Gapy-penjire "
               "açyklygyny, kök-baldak-şaha deňagramlylygyny we şekiliň dolulygyny bilelikde baha ber.",
        "Family": "Şekilleriň tertibi, ululygy, biri-birinden uzaklygy, çaganyň özüni nirede goýýandygy we "
                  "ýok maşgala agzalary gatnaşyk ýagdaýyny görkezip biler.",
        "Cactus": "Tikenleriň sany we ugry goranmaklygy, küýze we toprak howpsuzlyk islegini, güller oňyn "
                  "duýgulary, ululygy bolsa özüni görkezişini aňladyp biler.",
        "Tree": "Baldak, kök we şahanyň deňagramlylygy; döwük şahalar, oýuklar, miweler we ýer çyzygy içki "
                "güýji, kök urmagy we geljege gönükmegi görkezip biler.",
        "Garden": "Bagyň tertibi, ösümlik dürlüligi, serhetler we haýatlar, ösüş we alada temalary çaganyň "
                  "daş-töweregini we özüne seredişini aňladyp biler.",
        "BenderGestalt2": "Görüş-hereket utgaşygyny baha ber: şekil üýtgemesi, aýlanma, utgaşyk ýalňyşlary, "
                          "gaýtalanma we sahypa tertibi. Duýgy düşündirişini çäkli sakla.",
        "ReyOsterrieth": "Göçürme we ýatlama tapgyrlarynda meýilleşdiriş usulyny, jikme-jikligiň saklanyşyny, "
                         "bitewi-bölek gatnaşygyny we tertibi baha ber; iki tapgyry deňeşdir.",
        "Luscher": "Reňk saýlaw tertibi we ret edilen reňkler esasynda häzirki duýgy ýagdaýyny seresaplylyk "
                   "bilen düşündir; şekil bolmazlygy mümkin, maglumata we alamatlara daýan.",
    },
    "uz": {
        "DAP": "Shakl nisbatlari, bosh-tana muvozanati, qo'llar va yuz ifodasi, sahifadagi joyi va o'lchami; "
               "katta shakl ishonchni, juda kichik shakl o'zini chetga olishni bildirishi mumkin.",
        "HTP": "Uy oilaviy muhitni, daraxt ichki dunyo va o'sishni, odam o'zini idrok etishni ifodalaydi. "
               "Eshik-deraza ochiqligi, ildiz-tana-shox muvozanati va shakl to'liqligini birga baholang.",
        "Family": "Shakllarning tartibi, o'lchami, bir-biridan uzoqligi, bola o'zini qayerga qo'ygani va "
                  "tushirib qoldirilgan oila a'zolari munosabatlar dinamikasini ko'rsatishi mumkin.",
        "Cactus": "Tikanlar soni va yo'nalishi himoyalanishni, tuvak va tuproq xavfsizlik ehtiyojini, gullar "
                  "ijobiy his-tuyg'ularni, o'lcham esa o'zini namoyon qilishni aks ettirishi mumkin.",
        "Tree": "Tana, ildiz va shox muvozanati; singan shoxlar, kovaklar, mevalar va yer chizig'i ichki "
                "resurslar, ildiz otganlik va kelajakka yo'nalishni ko'rsatishi mumkin.",
        "Garden": "Bog' tartibi, o'simliklar xilma-xilligi, chegaralar va to'siqlar, o'sish va parvarish "
                  "mavzulari bolaning atrofini va o'zini parvarish qilishini aks ettirishi mumkin.",
        "BenderGestalt2": "Ko'rish-harakat integratsiyasini baholang: shakl buzilishi, aylantirish, "
                          "integratsiya xatolari, perseveratsiya va sahifa tartibi. Hissiy talqinni cheklang.",
        "ReyOsterrieth": "Nusxa ko'chirish va eslash bosqichlarida rejalashtirish strategiyasi, tafsilotlar "
                         "saqlanishi, butun-qism munosabati va tartibni baholang; ikki bosqichni solishtiring.",
        "Luscher": "Rang tanlash tartibi va rad etilgan ranglar asosida hozirgi hissiy holatni ehtiyotkorlik "
                   "bilan talqin qiling; tasvir bo'lmasligi mumkin, kontekst va belgilarga tayaning.",
    },
}

TAXONOMY: dict[str, dict[str, str]] = {
    "tr": {
        "war": "savaş, silah, asker, bombalama", "violence": "şiddet, kavga, yaralanma",
        "disaster": "deprem, sel, yangın", "loss": "kayıp, özlem", "loneliness": "yalnızlık, dışlanmışlık",
        "fear": "korku, canavarlar, karanlık", "abuse": "istismar işaretleri",
        "family_separation": "ayrılık, boşanma, parçalanmış aile", "death": "ölüm, mezar, yas",
        "neglect": "ihmal, bakımsızlık", "bullying": "akran zorbalığı",
        "domestic_violence_witness": "ev içi şiddete tanıklık", "parental_addiction": "ebeveyn bağımlılığı",
        "parental_mental_illness": "ebeveynin ruhsal hastalığı", "medical_trauma": "hastane, tıbbi işlem travması",
        "anxiety": "kaygı, gerginlik", "depression": "çökkünlük, umutsuzluk",
        "low_self_esteem": "düşük öz değer", "anger": "öfke", "school_stress": "okul stresi",
        "social_rejection": "sosyal dışlanma", "displacement": "göç, yerinden edilme",
        "poverty": "yoksulluk, yoksunluk", "cyberbullying": "siber zorbalık",
    },
    "en": {
        "war": "war, weapons, soldiers, bombing", "violence": "violence, fighting, injury",
        "disaster": "earthquake, flood, fire", "loss": "loss, longing", "loneliness": "loneliness, isolation",
        "fear": "fear, monsters, darkness", "abuse": "signs of abuse",
        "family_separation": "separation, divorce, split family", "death": "death, graves, mourning",
        "neglect": "neglect, lack of care", "bullying": "peer bullying",
        "domestic_violence_witness": "witnessing domestic violence", "parental_addiction": "parental addiction",
        "parental_mental_illness": "parental mental illness", "medical_trauma": "hospital or medical-procedure trauma",
        "anxiety": "anxiety, tension", "depression": "low mood, hopelessness",
        "low_self_esteem": "low self-esteem", "anger": "anger", "school_stress": "school stress",
        "social_rejection": "social rejection", "displacement": "migration, displacement",
        "poverty": "poverty, deprivation", "cyberbullying": "cyberbullying",
    },
    "ru": {
        "war": "война, оружие, солдаты, бомбёжки", "violence": "насилие, драки, ранения",
        "disaster": "землетрясение, наводнение, пожар", "loss": "утрата, тоска", "loneliness": "одиночество, изоляция",
        "fear": "страх, монстры, темнота", "abuse": "признаки жестокого обращения",
        "family_separation": "разлука, развод, распавшаяся семья", "death": "смерть, могилы, траур",
        "neglect": "пренебрежение, отсутствие заботы", "bullying": "травля сверстниками",
        "domestic_violence_witness": "свидетельство домашнего насилия", "parental_addiction": "зависимость родителя",
        "parental_mental_illness": "психическое заболевание родителя", "medical_trauma": "травма от больницы или процедур",
        "anxiety": "тревога, напряжение", "depression": "подавленность, безнадёжность",
        "low_self_esteem": "низкая самооценка", "anger": "гнев", "school_stress": "школьный стресс",
        "social_rejection": "социальное отвержение", "displacement": "миграция, вынужденное переселение",
        "poverty": "бедность, лишения", "cyberbullying": "кибербуллинг",
    },
    "tk": {
        "war": "uruş, ýarag, esger, bombalama", "violence": "zorluk, uruşmak, ýaralanma",
        "disaster": "ýer titremesi, sil, ýangyn", "loss": "ýitgi, küýsemek", "loneliness": "ýalňyzlyk, üzňelik",
        "fear": "gorky, arwahlar, garaňkylyk", "abuse": "kemsitme alamatlary",
        "family_separation": "aýrylyşmak, maşgalanyň dargamagy", "death": "ölüm, mazar, ýas",
        "neglect": "äsgermezlik, idegsizlik", "bullying": "deň-duş zorlugy",
        "domestic_violence_witness": "öý içindäki zorluga şaýat bolmak", "parental_addiction": "ene-atanyň endikge baglylygy",
        "parental_mental_illness": "ene-atanyň ruhy keseli", "medical_trauma": "hassahana ýa-da lukmançylyk işi bilen bagly ýara",
        "anxiety": "alada, dartgynlylyk", "depression": "ruhy çökgünlik, umytsyzlyk",
        "low_self_esteem": "özüňe pes baha", "anger": "gahar", "school_stress": "mekdep stresi",
        "social_rejection": "jemgyýetçilik taýdan ret edilmek", "displacement": "göçmek, ýerinden edilmek",
        "poverty": "garyplyk, mahrumlyk", "cyberbullying": "kiber zorluk",
    },
    "uz": {
        "war": "urush, qurol, askar, bombardimon", "violence": "zo'ravonlik, janjal, jarohat",
        "disaster": "zilzila, suv toshqini, yong'in", "loss": "yo'qotish, sog'inch", "loneliness": "yolg'izlik, ajralganlik",
        "fear": "qo'rquv, maxluqlar, qorong'ilik", "abuse": "zo'ravonlik belgilari",
        "family_separation": "ajralish, buzilgan oila", "death": "o'lim, qabr, motam",
        "neglect": "e'tiborsizlik, qarovsizlik", "bullying": "tengdoshlar tazyiqi",
        "domestic_violence_witness": "oilaviy zo'ravonlikka guvoh bo'lish", "parental_addiction": "ota-ona qaramligi",
        "parental_mental_illness": "ota-onaning ruhiy kasalligi", "medical_trauma": "kasalxona yoki tibbiy muolaja jarohati",
        "anxiety": "xavotir, taranglik", "depression": "tushkunlik, umidsizlik",
        "low_self_esteem": "past o'zini baholash", "anger": "g'azab", "school_stress": "maktab stressi",
        "social_rejection": "ijtimoiy rad etilish", "displacement": "ko'chish, majburiy ko'chirilish",
        "poverty": "qashshoqlik, mahrumlik", "cyberbullying": "kiberbulling",
    },
}


def render_taxonomy(language: str) -> str:
    """One ``- code: description`` line per concern category, plus ``other``."""
    lines = [f"- {code}: {text}" for code, text in TAXONOMY[language].items()]
    lines.append("- other")
    return "\n".join(lines)
