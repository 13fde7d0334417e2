#!/usr/bin/env python3
"""
Static WHOIS server inventory.

Registrar WHOIS servers that answer thin-registry queries for .com/.net
names on port 43. The fan-out engine races all of them; only the list is
data, no per-server behaviour lives here.
"""

DEFAULT_SERVERS: tuple[str, ...] = (
    "whois.findyouaname.com",
    "whois.godomaingo.com",
    "whois.finduaname.com",
    "whois.namestrategies.com",
    "whois.nameshere.com",
    "whois.evonames.com",
    "whois.noticeddomains.com",
    "whois.fabulous.com",
    "whois.tradenamed.com",
    "whois.heavydomains.net",
    "whois.namearsenal.com",
    "whois.namevolcano.com",
    "whois.gatekeeperdomains.net",
    "whois.goserveyourdomain.com",
    "whois.namesalacarte.com",
    "whois.lakeodomains.com",
    "whois.namesystem.com",
    "whois.netdorm.com",
    "whois.domainraker.net",
    "whois.enomtoo.com",
    "whois.enomnz.com",
    "whois.enomworld.com",
    "whois.enomten.com",
    "whois.enomx.com",
    "whois.domainclub.com",
    "whois.dyndns.com",
    "whois.namesilo.com",
    "whois.namethread.com",
    "whois.namenelly.com",
    "whois.fushitarazu.com",
    "whois.sssasss.com",
    "whois.enom423.com",
    "whois.exai.com",
    "whois.enom431.com",
    "whois.gochinadomains.com",
    "whois.initialesonline.net",
    "whois.namestream.com",
    "whois.ownidentity.com",
    "whois.nictrade.se",
    "whois.nominate.net",
    "whois.net-chinese.com.tw",
    "whois.gandi.net",
    "whois.star-domain.jp",
    "whois.subreg.cz",
    "whois.namesay.com",
    "whois.maprilis.com.vn",
    "whois.gofrancedomains.com",
    "whois.paknic.com",
    "whois.ssandomain.com",
    "whois.omnis.com",
    "whois.netim.com",
    "whois.eurotrashnames.com",
    "whois.networking4all.com",
    "whois.ipmirror.com",
    "whois.nawang.cn",
    "whois.iisp.com",
    "whois.domaindelights.com",
    "whois.nameturn.com",
    "whois.domainarmada.com",
    "whois.gradeadomainnames.com",
    "whois.domaincentre.ca",
    "whois.hawthornedomains.com",
    "whois.domaincomesaround.com",
    "whois.domaininthebasket.com",
    "whois.domaincapitan.com",
    "whois.domaingazelle.com",
    "whois.gungagalunga.biz",
    "whois.planetdomain.com",
    "whois.nayana.com",
    "whois.net4domains.com",
    "whois.ksdom.kr",
    "whois.softlayer.com",
    "whois.getyername.com",
    "whois.oldtowndomains.com",
    "whois.oregonurls.com",
    "whois.ibi.net",
    "whois.insanenames.com",
    "whois.domainprime.com",
    "whois.worthydomains.com",
    "whois.jetpackdomains.com",
    "whois.webmasters.com",
    "whois.domainsofvalue.com",
    "whois.nerdnames.com",
    "whois.enom421.com",
    "whois.worldbizdomains.com",
    "whois.netart-registrar.com",
    "whois.networksolutions.com",
    "whois.notsofamousnames.com",
    "whois.oldworldaliases.com",
    "whois.godaddy.com",
    "whois.name.com",
    "whois.nic.ru",
    "whois.onlinenic.com",
    "whois.dynanames.com",
    "whois.myobnet.com",
    "whois.22.cn",
    "whois.35.com",
    "whois.oregoneu.com",
    "whois.625domains.com",
    "whois.eNom415.com",
    "whois.enom429.com",
    "whois.hostway.com",
    "whois.pairnic.com",
    "whois.ourdomains.com",
    "whois.2imagen.net",
)
