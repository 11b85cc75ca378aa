# wordlist.py
# Bundled default dictionary: four-letter Russian words, one per line.

DEFAULT_WORDS = """\
бани
баня
бить
блин
боль
бора
борт
брак
брат
бром
бура
буря
быть
ваня
вера
вест
весь
вила
вина
вино
вить
вода
воля
враг
высь
гном
гора
горе
гром
гусь
гуся
дело
день
доля
друг
дуга
дума
дура
дыня
жара
жест
жить
заря
звук
зима
злак
знак
кара
каре
кафе
каша
кино
клин
клон
кожа
коза
кора
корт
кота
кран
крик
крот
круг
кура
курс
куча
лень
лить
лото
лужа
лука
луна
мама
маша
мело
мера
мина
моль
море
мост
мрак
мука
муха
мыло
нить
нога
нора
нота
пара
парс
паюс
пень
пила
пить
плед
плес
плюс
поза
поля
пони
пора
порт
пост
рама
рана
рано
рога
рожа
роза
роль
рост
рота
руда
рука
рыба
рыло
рысь
сало
само
сани
село
семя
сено
сеня
сера
сила
сито
след
слет
слог
слон
слух
смех
снег
сода
соль
соня
сорт
срок
стог
сток
стон
сума
сумо
счет
тара
тело
тема
темя
тень
тест
тоня
торт
тост
тура
туча
тучи
урок
учет
фара
фрак
фура
шест
шина
шить
"""
