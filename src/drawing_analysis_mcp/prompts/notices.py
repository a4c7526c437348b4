"""User-facing fixed texts: disclaimer and fallback-result content."""

from __future__ import annotations

DISCLAIMERS: dict[str, str] = {
    "tr": (
        "Bu değerlendirme yapay zekâ destekli bir gözlem aracıdır ve tanı niteliği taşımaz. "
        "Çocuğunuzun gelişimi veya duygusal durumu hakkında endişeleriniz varsa bir çocuk "
        "psikoloğu ya da uzmanla görüşmenizi öneririz."
    ),
    "en": (
        "This assessment is an AI-assisted observation tool and is not a diagnosis. "
        "If you have concerns about the child's development or emotional wellbeing, please "
        "consult a child psychologist or another qualified specialist."
    ),
    "ru": (
        "Эта оценка — наблюдение с помощью искусственного интеллекта, а не диагноз. "
        "Если вас беспокоит развитие или эмоциональное состояние ребёнка, обратитесь к "
        "детскому психологу или другому специалисту."
    ),
    "tk": (
        "Bu baha emeli aň bilen goldanýan synlama guralydyr we diagnoz däldir. "
        "Çagaňyzyň ösüşi ýa-da duýgy ýagdaýy barada aladaňyz bar bolsa, çaga psihology "
        "ýa-da başga hünärmen bilen maslahatlaşmagyňyzy maslahat berýäris."
    ),
    "uz": (
        "Ushbu baholash sun'iy intellekt yordamidagi kuzatuv vositasi bo'lib, tashxis emas. "
        "Bolangizning rivojlanishi yoki hissiy holati haqida xavotiringiz bo'lsa, bolalar "
        "psixologi yoki boshqa mutaxassis bilan maslahatlashishingizni tavsiya qilamiz."
    ),
}

FALLBACK_INSIGHT_TITLE: dict[str, str] = {
    "tr": "Çizim Analizi",
    "en": "Drawing Analysis",
    "ru": "Анализ рисунка",
    "tk": "Çyzgy derňewi",
    "uz": "Rasm tahlili",
}

FALLBACK_GENERIC_NOTE: dict[str, str] = {
    "tr": "Analiz tamamlandı ancak yanıt beklenmeyen bir formatta geldi. Lütfen tekrar deneyin.",
    "en": "The analysis finished but the response arrived in an unexpected format. Please try again.",
    "ru": "Анализ завершён, но ответ пришёл в неожиданном формате. Пожалуйста, попробуйте ещё раз.",
    "tk": "Derňew tamamlandy, emma jogap garaşylmadyk görnüşde geldi. Gaýtadan synanyşyň.",
    "uz": "Tahlil yakunlandi, lekin javob kutilmagan formatda keldi. Iltimos, qayta urinib ko'ring.",
}

FALLBACK_QUALITY_NOTE: dict[str, str] = {
    "tr": "Model yanıtı yapılandırılmış biçimde okunamadı; sonuçlar sınırlıdır.",
    "en": "The model response could not be read in structured form; results are limited.",
    "ru": "Ответ модели не удалось прочитать в структурированном виде; результаты ограничены.",
    "tk": "Modeliň jogaby gurluşly görnüşde okalyp bilinmedi; netijeler çäkli.",
    "uz": "Model javobini tuzilgan shaklda o'qib bo'lmadi; natijalar cheklangan.",
}

RETRY_TIP: dict[str, dict[str, object]] = {
    "tr": {
        "title": "Analizi tekrar deneyin",
        "steps": [
            "Çizimin net, iyi aydınlatılmış bir fotoğrafını çekin.",
            "Birkaç dakika sonra analizi yeniden başlatın.",
        ],
        "why": "Daha net bir görsel ve yeni bir deneme genellikle daha ayrıntılı bir değerlendirme sağlar.",
    },
    "en": {
        "title": "Try the analysis again",
        "steps": [
            "Take a clear, well-lit photo of the drawing.",
            "Start the analysis again in a few minutes.",
        ],
        "why": "A clearer image and a fresh attempt usually produce a more detailed assessment.",
    },
    "ru": {
        "title": "Повторите анализ",
        "steps": [
            "Сделайте чёткую фотографию рисунка при хорошем освещении.",
            "Запустите анализ снова через несколько минут.",
        ],
        "why": "Более чёткое изображение и новая попытка обычно дают более подробную оценку.",
    },
    "tk": {
        "title": "Derňewi gaýtadan synanyşyň",
        "steps": [
            "Çyzgynyň aýdyň, gowy yşyklandyrylan suratyny alyň.",
            "Birnäçe minutdan soň derňewi täzeden başlaň.",
        ],
        "why": "Has aýdyň şekil we täze synanyşyk köplenç has jikme-jik baha berýär.",
    },
    "uz": {
        "title": "Tahlilni qayta urinib ko'ring",
        "steps": [
            "Rasmning aniq, yaxshi yoritilgan suratini oling.",
            "Bir necha daqiqadan so'ng tahlilni qayta boshlang.",
        ],
        "why": "Aniqroq tasvir va yangi urinish odatda batafsilroq baho beradi.",
    },
}

FALLBACK_CONVERSATION_GUIDE: dict[str, dict[str, list[str]]] = {
    "tr": {
        "openingQuestions": ["Bana bu resmi anlatır mısın?", "Çizerken neler hissettin?"],
        "followUpQuestions": ["En çok hangi kısmını sevdin?"],
        "avoidTopics": ["Çizimi düzeltmeye ya da eleştirmeye çalışmak"],
        "supportiveResponses": ["Bunu çizmek için çok emek vermişsin, anlattığın için teşekkürler."],
    },
    "en": {
        "openingQuestions": ["Can you tell me about this picture?", "How did you feel while drawing it?"],
        "followUpQuestions": ["Which part do you like most?"],
        "avoidTopics": ["Correcting or criticising the drawing"],
        "supportiveResponses": ["You put a lot of effort into this, thank you for sharing it with me."],
    },
    "ru": {
        "openingQuestions": ["Расскажешь мне об этом рисунке?", "Что ты чувствовал(а), когда рисовал(а)?"],
        "followUpQuestions": ["Какая часть тебе нравится больше всего?"],
        "avoidTopics": ["Исправлять или критиковать рисунок"],
        "supportiveResponses": ["Ты очень постарался(лась), спасибо, что поделился(лась) со мной."],
    },
    "tk": {
        "openingQuestions": ["Maňa bu surat barada gürrüň berip bilersiňmi?", "Çekeniňde näme duýdyň?"],
        "followUpQuestions": ["Iň köp haýsy bölegi haladyň?"],
        "avoidTopics": ["Çyzgyny düzetmäge ýa-da tankyt etmäge synanyşmak"],
        "supportiveResponses": ["Muny çekmek üçin köp zähmet çekipsiň, paýlaşanyň üçin sag bol."],
    },
    "uz": {
        "openingQuestions": ["Menga bu rasm haqida aytib berasanmi?", "Chizayotganingda nimani his qilding?"],
        "followUpQuestions": ["Qaysi qismi senga eng ko'p yoqdi?"],
        "avoidTopics": ["Rasmni tuzatish yoki tanqid qilishga urinish"],
        "supportiveResponses": ["Buni chizish uchun ko'p harakat qilibsan, baham ko'rganing uchun rahmat."],
    },
}
