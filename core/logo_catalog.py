"""
logo_catalog.py
The built-in logo library.

Format: blocks separated by ";;". In each block the first line starting with
"(" declares the OS pattern (a trailing "*" is dropped); every following line
containing a ${cN} token is a line of art. Indentation before the first token
is not part of the art.
"""

DEFAULT_LOGO = (
    "  ${c4}     ___     ",
    "  ${c4}    (${c7}.. ${c4}|",
    "  ${c4}    (${c5}<> ${c4}|",
    "  ${c4}   / ${c7}__  ${c4}\\",
    "  ${c4}  ( ${c7}/  \\ ${c4}/|",
    "  ${c5} _${c4}/\\ ${c7}__)${c4}/${c5}_${c4})",
    "  ${c5} \\/${c4}-____${c5}\\/",
)

CATALOG = r"""
    ([Aa]lpine)*
        ${c4}   /\ /\
        ${c4}  /${c7}/ ${c4}\  \
        ${c4} /${c7}/   ${c4}\  \
        ${c4}/${c7}//    ${c4}\  \
        ${c7}//      ${c4}\  \
        ${c4}         \
;;
    ([Aa]ndroid)*
        ${c2}  ;,           ,;
        ${c2}   ';,.-----.,;'
        ${c2}  ,'           ',
        ${c2} /    O     O    \
        ${c2}|                 |
        ${c2}'-----------------'
;;
    ([Aa]rch)*
        ${c6}       /\
        ${c6}      /  \
        ${c6}     /\   \
        ${c4}    /      \
        ${c4}   /   ,,   \
        ${c4}  /   |  |  -\
        ${c4} /_-''    ''-_\
;;
    ([Aa]rco)*
        ${c4}      /\
        ${c4}     /  \
        ${c4}    / /\ \
        ${c4}   / /  \ \
        ${c4}  / /    \ \
        ${c4} / / _____\ \
        ${c4}/_/  `----.\_\
;;
    ([Aa]rtix)*
        ${c6}      /\
        ${c6}     /  \
        ${c6}    /`'.,\
        ${c6}   /     ',
        ${c6}  /      ,`\
        ${c6} /   ,.'`.  \
        ${c6}/.,'`     `'.\
;;
    ([Cc]ent[Oo][Ss])*
        ${c2} ____${c3}^${c5}____
        ${c2} |\  ${c3}|${c5}  /|
        ${c2} | \ ${c3}|${c5} / |
        ${c5}<---- ${c4}---->
        ${c4} | / ${c2}|${c3} \ |
        ${c4} |/__${c2}|${c3}__\|
        ${c2}     v
;;
    ([Dd]ebian)*
        ${c1}  _____
        ${c1} /  __ \
        ${c1}|  /    |
        ${c1}|  \___-
        ${c1}-_
        ${c1}  --_
;;
    ([Ee]lementary)*
        ${c7}  _______
        ${c7} / ____  \
        ${c7}/  |  /  /\
        ${c7}|__\ /  / |
        ${c7}\   /__/  /
        ${c7} \_______/
;;
    ([Ee]ndeavour)*
        ${c1}      /${c4}\
        ${c1}    /${c4}/  \${c6}\
        ${c1}   /${c4}/    \ ${c6}\
        ${c1} / ${c4}/     _) ${c6})
        ${c1}/_${c4}/___-- ${c6}__-
        ${c6} /____--
;;
    ([Ff]edora)*
        ${c4}        ,'''''.
        ${c4}       |   ,.  |
        ${c4}       |  |  '_'
        ${c4}  ,....|  |..
        ${c4}.'  ,_;|  |..'
        ${c4}|  |   |  |
        ${c4}|  ',_,'  |
        ${c4} '.     ,'
        ${c4}   '''''
;;
    ([Ff]ree[Bb][Ss][Dd])*
        ${c1}/\,-'''''-,/\
        ${c1}\_)       (_/
        ${c1}|           |
        ${c1}|           |
        ${c1} ;         ;
        ${c1}  '-_____-'
;;
    ([Gg]entoo)*
        ${c5} _-----_
        ${c5}(       \
        ${c5}\    0   \
        ${c7} \        )
        ${c7} /      _/
        ${c7}(     _-
        ${c7}\____-
;;
    ([Kk][Ii][Ss][Ss])*
        ${c4}    ___
        ${c4}   (${c7}.· ${c4}|
        ${c4}   (${c5}<> ${c4}|
        ${c4}  / ${c7}__  ${c4}\
        ${c4} ( ${c7}/  \ ${c4}/|
        ${c5}_${c4}/\ ${c7}__)${c4}/${c5}_${c4})
        ${c5}\/${c4}-____${c5}\/
;;
    ([Dd]arwin|mac[Oo][Ss])*
        ${c2}       .:'
        ${c2}    _ :'_
        ${c3} .'`_`-'_``.
        ${c1}:________.-'
        ${c1}:_______:
        ${c4} :_______`-;
        ${c5}  `._.-._.'
;;
    ([Mm]anjaro)*
        ${c2}||||||||| ||||
        ${c2}||||||||| ||||
        ${c2}||||      ||||
        ${c2}|||| |||| ||||
        ${c2}|||| |||| ||||
        ${c2}|||| |||| ||||
        ${c2}|||| |||| ||||
;;
    ([Mm]int)*
        ${c2} ___________
        ${c2}|_          \
        ${c2}  | ${c7}| _____ ${c2}|
        ${c2}  | ${c7}| | | | ${c2}|
        ${c2}  | ${c7}| | | | ${c2}|
        ${c2}  | ${c7}\__${c7}___/ ${c2}|
        ${c2}  \_________/
;;
    ([Ll]inux [Mm]int)*
        ${c2} ___________
        ${c2}|_          \
        ${c2}  | ${c7}| _____ ${c2}|
        ${c2}  | ${c7}| | | | ${c2}|
        ${c2}  | ${c7}| | | | ${c2}|
        ${c2}  | ${c7}\_____/ ${c2}|
        ${c2}  \_________/
;;
    ([Nn]ix[Oo][Ss])*
        ${c4}  \\  \\ //
        ${c4} ==\\__\\/ //
        ${c4}   //   \\//
        ${c4}==//     //==
        ${c4} //\\___//
        ${c4}// /\\  \\==
        ${c4}  // \\  \\
;;
    ([Oo]pen[Bb][Ss][Dd])*
        ${c3}      _____
        ${c3}    \-     -/
        ${c3} \_/         \
        ${c3} |        ${c7}O O${c3} |
        ${c3} |_  <   )  3 )
        ${c3} / \         /
        ${c3}    /-_____-\
;;
    ([Oo]pen[Ss][Uu][Ss][Ee])*
        ${c2}  _______
        ${c2}__|   __ \
        ${c2}     / .\ \
        ${c2}     \__/ |
        ${c2}   _______|
        ${c2}   \_______
        ${c2}__________/
;;
    ([Pp]op!_[Oo][Ss])*
        ${c6}______
        ${c6}\   _ \        __
        ${c6} \ \ \ \      / /
        ${c6}  \ \_\ \    / /
        ${c6}   \  ___\  /_/
        ${c6}    \ \    _
        ${c6}   __\_\__(_)_
        ${c6}  (___________)
;;
    ([Rr]aspbian)*
        ${c2}  __  __
        ${c2} (_\)(/_)
        ${c1} (_(__)_)
        ${c1}(_(_)(_)_)
        ${c1} (_(__)_)
        ${c1}   (__)
;;
    ([Ss]lackware)*
        ${c4}   ________
        ${c4}  /  ______|
        ${c4}  | |______
        ${c4}  \______  \
        ${c4}   ______| |
        ${c4}| |________/
        ${c4}|____________
;;
    ([Ss]olus)*
        ${c4}     /|
        ${c4}    / |\
        ${c4}   /  | \ _
        ${c4}  /___|__\_\
        ${c4} \         /
        ${c4}  `-------´
;;
    ([Uu]buntu)*
        ${c3}         _
        ${c3}     ---(_)
        ${c3} _/  ---  \
        ${c3}(_) |   |
        ${c3}  \  --- _/
        ${c3}     ---(_)
;;
    ([Vv]oid)*
        ${c2}    _______
        ${c2} _ \______ -
        ${c2}| \  ___  \ |
        ${c2}| | /   \ | |
        ${c2}| | \___/ | |
        ${c2}| \______ \_|
        ${c2} -_______\
;;
"""
