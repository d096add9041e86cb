"""English to Urdu glossary used by the dictionary translator.

Multi-word phrases take precedence over the single words they contain.
Articles map to an empty string since Urdu has none.
"""

URDU_GLOSSARY: dict[str, str] = {
    # Phrases
    "artificial intelligence": "مصنوعی ذہانت",
    "machine learning": "مشین لرننگ",
    "breaking news": "تازہ ترین خبر",
    "in conclusion": "آخر میں",
    "for example": "مثال کے طور پر",
    "point out": "نشاندہی",
    # Articles
    "the": "",
    "a": "",
    "an": "",
    # Function words
    "and": "اور",
    "or": "یا",
    "but": "لیکن",
    "with": "کے ساتھ",
    "for": "کے لیے",
    "from": "سے",
    "in": "میں",
    "of": "کا",
    "to": "کو",
    "on": "پر",
    "by": "کی طرف سے",
    "this": "یہ",
    "that": "وہ",
    "these": "یہ",
    "those": "وہ",
    "it": "یہ",
    "we": "ہم",
    "you": "آپ",
    "they": "وہ",
    "our": "ہمارا",
    "their": "ان کا",
    "not": "نہیں",
    "also": "بھی",
    "very": "بہت",
    "more": "مزید",
    "most": "سب سے زیادہ",
    "how": "کیسے",
    "what": "کیا",
    "why": "کیوں",
    "is": "ہے",
    "are": "ہیں",
    "was": "تھا",
    "were": "تھے",
    "can": "سکتا ہے",
    # Vocabulary
    "important": "اہم",
    "significant": "نمایاں",
    "key": "کلیدی",
    "main": "مرکزی",
    "research": "تحقیق",
    "study": "مطالعہ",
    "analysis": "تجزیہ",
    "conclusion": "نتیجہ",
    "therefore": "لہذا",
    "company": "کمپنی",
    "companies": "کمپنیاں",
    "announce": "اعلان",
    "announced": "اعلان کیا",
    "investment": "سرمایہ کاری",
    "growth": "ترقی",
    "development": "ترقی",
    "increase": "اضافہ",
    "decrease": "کمی",
    "decline": "کمی",
    "launch": "آغاز",
    "launched": "شروع کیا",
    "technology": "ٹیکنالوجی",
    "ai": "مصنوعی ذہانت",
    "data": "ڈیٹا",
    "model": "ماڈل",
    "software": "سافٹ ویئر",
    "internet": "انٹرنیٹ",
    "digital": "ڈیجیٹل",
    "security": "سیکیورٹی",
    "privacy": "رازداری",
    "user": "صارف",
    "users": "صارفین",
    "developer": "ڈویلپر",
    "developers": "ڈویلپرز",
    "system": "نظام",
    "new": "نیا",
    "first": "پہلا",
    "today": "آج",
    "time": "وقت",
    "year": "سال",
    "years": "سال",
    "million": "ملین",
    "billion": "ارب",
    "percent": "فیصد",
    "people": "لوگ",
    "world": "دنیا",
    "global": "عالمی",
    "country": "ملک",
    "government": "حکومت",
    "economy": "معیشت",
    "business": "کاروبار",
    "market": "مارکیٹ",
    "future": "مستقبل",
    "expert": "ماہر",
    "experts": "ماہرین",
    "say": "کہتے ہیں",
    "says": "کہتا ہے",
    "said": "کہا",
    "help": "مدد",
    "expected": "متوقع",
    "use": "استعمال",
    "used": "استعمال کیا",
    "work": "کام",
    "life": "زندگی",
    "health": "صحت",
    "education": "تعلیم",
    "problem": "مسئلہ",
    "solution": "حل",
    "example": "مثال",
    "information": "معلومات",
    "news": "خبر",
    "blog": "بلاگ",
    "article": "مضمون",
    "summary": "خلاصہ",
    "good": "اچھا",
    "better": "بہتر",
    "best": "بہترین",
    "everyone": "سب",
    "move": "اقدام",
    "surprised": "حیران",
}
